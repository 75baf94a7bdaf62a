"""Prompt composer - turns a post description into three prompt texts."""

import logging

from ..generators import build_generators
from ..models import GeneratedResult, Template
from ..models.category import detect_category
from ..models.context import CompositionContext
from ..models.copy import get_cta, get_headline
from ..models.templates import TEMPLATES, get_template

logger = logging.getLogger(__name__)

# Generator paths, in output order
OUTPUT_SOURCES = ["text.final_copy", "text.image_prompt", "text.design_notes"]


class PromptComposer:
    """
    Deterministic composer: (content, index, catalog) -> GeneratedResult.

    Holds no per-call state, so one instance can serve any number of
    indices and batches.
    """

    def __init__(self, catalog: list[Template] | None = None):
        self.catalog = list(catalog) if catalog is not None else TEMPLATES
        if not self.catalog:
            raise ValueError("Template catalog must not be empty")
        self._generators = build_generators(OUTPUT_SOURCES)

    def compose(self, content: str, index: int, batch: int = 0) -> GeneratedResult:
        """
        Build one prompt variant.

        Args:
            content: Post description (callers reject blank input).
            index: Zero-based variant index; picks template, headline and CTA.
            batch: Caller-supplied key, only used in the result id.

        Returns:
            GeneratedResult with copy, image prompt and design notes.
        """
        context = self.build_context(content, index)
        logger.debug(
            "Composing prompt %d: category=%s template=%s",
            index, context.category.value, context.template.name,
        )

        final_copy, image_prompt, design_notes = (
            generator.generate(context) for generator in self._generators
        )
        return GeneratedResult(
            id=f"prompt-{batch}-{index}",
            category=context.category,
            template=context.template,
            final_copy=final_copy,
            image_prompt=image_prompt,
            design_notes=design_notes,
        )

    def build_context(self, content: str, index: int) -> CompositionContext:
        return CompositionContext(
            content=content,
            category=detect_category(content),
            template=get_template(index, self.catalog),
            headline=get_headline(index),
            cta=get_cta(index),
        )
