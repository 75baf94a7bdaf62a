"""Batch runner - validates a request and composes one prompt per index."""

import itertools
import logging

from ..config import MAX_QUANTITY, MIN_QUANTITY
from ..models import GeneratedResult
from .composer import PromptComposer

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Request rejected before generation. Message is user-facing."""
    pass


class BatchRunner:
    """Compose `quantity` prompt variants for one post description."""

    def __init__(self, composer: PromptComposer | None = None):
        self.composer = composer or PromptComposer()
        self._batches = itertools.count(1)

    @staticmethod
    def validate(content: str, quantity: int) -> None:
        """Raise ValidationError if content is blank or quantity is out of range."""
        if not content.strip():
            raise ValidationError("Please enter a post description to generate prompts.")
        if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
            raise ValidationError(
                f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}, got {quantity}"
            )

    def run(self, content: str, quantity: int) -> list[GeneratedResult]:
        """
        Compose variants for index 0..quantity-1.

        Raises:
            ValidationError: If content is blank or quantity is out of range.
        """
        self.validate(content, quantity)

        batch = next(self._batches)
        logger.info("Batch %d: composing %d prompts", batch, quantity)
        results = [self.composer.compose(content, i, batch=batch) for i in range(quantity)]
        logger.info(
            "Batch %d: done (category=%s)", batch, results[0].category.value,
        )
        return results
