"""Design template catalog for post prompts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Template:
    """Named visual style for a post design."""

    name: str
    layout: str
    style: str
    hero: str
    colors: str


# 10 templates, cycled by prompt index
TEMPLATES: list[Template] = [
    Template(
        "Minimalist Clean",
        "centered-text",
        "Clean minimalist design with lots of white space, centered text layout, simple sans-serif typography",
        "subtle geometric shapes or minimal icons",
        "Primary navy #03224C with white background, minimal orange accents",
    ),
    Template(
        "Bold Statement",
        "split-diagonal",
        "Bold diagonal split layout, large typography, high contrast design",
        "dynamic abstract shapes or bold graphics",
        "Heavy use of orange #FF8828 with navy text, white accents",
    ),
    Template(
        "Infographic Style",
        "grid-sections",
        "Multi-section grid layout with data visualization elements, charts and icons",
        "charts, graphs, or data visualization elements",
        "Navy backgrounds with orange data points and white text",
    ),
    Template(
        "Quote Design",
        "quote-focused",
        "Large quotation marks, elegant typography, quote-focused design",
        "decorative quotation marks or inspirational imagery",
        "Navy background with orange quote marks and white text",
    ),
    Template(
        "Modern Card",
        "card-stack",
        "Layered card design with shadows, modern card UI elements",
        "floating cards or modern UI elements",
        "White cards on navy background with orange highlights",
    ),
    Template(
        "Split Hero",
        "left-right-split",
        "50/50 split design with text on left, large visual on right",
        "large product image or team photo on right side",
        "Navy left panel, white right panel, orange accents",
    ),
    Template(
        "Geometric Modern",
        "geometric-shapes",
        "Modern geometric shapes, triangles and circles, contemporary design",
        "geometric patterns, triangles, circles, modern shapes",
        "Orange geometric shapes on navy background with white text",
    ),
    Template(
        "Corporate Professional",
        "header-body-footer",
        "Traditional corporate layout with clear header, body, footer sections",
        "professional icons or corporate imagery",
        "White background with navy headers and orange call-to-actions",
    ),
    Template(
        "Creative Artistic",
        "organic-flow",
        "Organic flowing design, curved elements, artistic and creative",
        "artistic illustrations or creative graphics",
        "Gradient backgrounds mixing navy and orange with creative elements",
    ),
    Template(
        "Tech Innovation",
        "tech-grid",
        "High-tech grid design, digital elements, modern technology aesthetic",
        "tech icons, circuit patterns, or innovation graphics",
        "Dark navy background with bright orange tech elements and white text",
    ),
]


def get_template(index: int, catalog: list[Template] | None = None) -> Template:
    """Get template by index (cycles if index >= len(catalog))."""
    catalog = catalog if catalog is not None else TEMPLATES
    return catalog[index % len(catalog)]
