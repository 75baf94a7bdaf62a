"""Image-generation prompt generator."""

from .. import register
from ..base import Generator
from ...models.context import CompositionContext
from ...models.copy import BRAND_NAME, POST_SIZE, get_content_focus


@register("text.image_prompt")
class ImagePromptGenerator(Generator):
    """Natural-language instruction for an image model, shaped by template and category."""

    def generate(self, context: CompositionContext) -> str:
        t = context.template
        focus = get_content_focus(context.category)
        return f"""Create a professional {POST_SIZE} social media post using "{t.name}" design template.

LAYOUT STYLE: {t.layout}
DESIGN APPROACH: {t.style}

CONTENT FOCUS: {focus}

VISUAL ELEMENTS:
- Hero graphics: {t.hero}
- {BRAND_NAME} logo placement (adapt to layout style)
- Typography: Modern, professional fonts suitable for {t.name.lower()} style

COLOR SCHEME: {t.colors}

COMPOSITION: Use {t.layout} layout approach with professional {t.style.lower()}. Make this design distinctly different from other social media posts with unique visual hierarchy and element positioning.

BRAND ELEMENTS: Include {BRAND_NAME} branding while maintaining the {t.name} aesthetic. Ensure this design stands out as completely different from minimalist or standard corporate posts."""
