"""Data models."""

from .category import Category
from .result import GeneratedResult
from .templates import Template

__all__ = ["Category", "GeneratedResult", "Template"]
