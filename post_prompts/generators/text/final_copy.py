"""Marketing copy generator."""

from .. import register
from ..base import Generator
from ...models.context import CompositionContext
from ...models.copy import BRAND_HASHTAGS
from ...utils import to_hashtag


@register("text.final_copy")
class FinalCopyGenerator(Generator):
    """Headline, raw content, call-to-action and hashtag line."""

    def generate(self, context: CompositionContext) -> str:
        hashtags = " ".join([*BRAND_HASHTAGS, to_hashtag(context.template.name)])
        parts = [
            context.headline.render(context.content),
            context.content,
            context.cta,
            hashtags,
        ]
        return "\n\n".join(parts)
