"""Generated result model."""

from dataclasses import dataclass

from .category import Category
from .templates import Template


@dataclass(frozen=True)
class GeneratedResult:
    """One prompt variant: copy, image prompt and design notes."""

    id: str
    category: Category
    template: Template
    final_copy: str
    image_prompt: str
    design_notes: str

    @property
    def full_prompt(self) -> str:
        """All three texts, blank-line separated (what gets sent to the chat tool)."""
        return f"{self.final_copy}\n\n{self.image_prompt}\n\n{self.design_notes}"
