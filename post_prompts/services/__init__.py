"""Services."""

from .batch import BatchRunner, ValidationError
from .composer import PromptComposer
from .export import build_chat_url, build_chat_urls, format_all

__all__ = [
    "BatchRunner",
    "PromptComposer",
    "ValidationError",
    "build_chat_url",
    "build_chat_urls",
    "format_all",
]
