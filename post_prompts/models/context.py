"""Composition context passed to generators."""

from dataclasses import dataclass

from .category import Category
from .copy import Headline
from .templates import Template


@dataclass(frozen=True)
class CompositionContext:
    """Everything a text generator needs for one prompt variant."""
    content: str
    category: Category
    template: Template
    headline: Headline
    cta: str
