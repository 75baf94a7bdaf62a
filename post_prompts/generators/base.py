"""Generator base class."""

from abc import ABC, abstractmethod

from ..models.context import CompositionContext


class Generator(ABC):
    """Base class for text generators. One string per prompt variant."""

    @abstractmethod
    def generate(self, context: CompositionContext) -> str:
        """Build the text for a single variant."""
        pass
