"""Templated social post prompts: marketing copy, image prompt and design notes."""

from .models import Category, GeneratedResult, Template
from .services import BatchRunner, PromptComposer, ValidationError

__all__ = [
    "BatchRunner",
    "Category",
    "GeneratedResult",
    "PromptComposer",
    "Template",
    "ValidationError",
]
