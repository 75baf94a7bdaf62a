"""Design notes generator - human-readable spec sheet for a variant."""

from .. import register
from ..base import Generator
from ...models.context import CompositionContext
from ...models.copy import POST_SIZE


@register("text.design_notes")
class DesignNotesGenerator(Generator):

    def generate(self, context: CompositionContext) -> str:
        t = context.template
        return f"""📐 DESIGN SPECIFICATION - {t.name.upper()}:

🎨 TEMPLATE: {t.name}
📱 DIMENSIONS: {POST_SIZE} square format
🎯 LAYOUT SYSTEM: {t.layout}

🖼️ VISUAL APPROACH:
{t.style}

🎨 COLOR PALETTE:
{t.colors}

📍 KEY ELEMENTS:
• Hero Section: {t.hero}
• Typography: Professional fonts optimized for {t.name.lower()} aesthetic
• Logo Integration: Adaptive placement for {t.layout} layout
• Content Hierarchy: Designed for {context.category.value} post type
• Call-to-Action: {context.cta}

🔧 TECHNICAL SPECS:
• Style Theme: {t.name}
• Layout Pattern: {t.layout}
• Visual Weight: Balanced for social media engagement
• Brand Consistency: Maintains Angrio identity within {t.name.lower()} framework

⚡ UNIQUENESS FACTOR: This design should be immediately distinguishable from other Angrio posts through its {t.name.lower()} approach and {t.layout} layout system."""
