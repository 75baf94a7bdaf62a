"""Export helpers - clipboard text and chat-tool URLs."""

from urllib.parse import quote

from ..config import CHAT_BASE_URL, CHAT_MODEL_BASE_URL
from ..models import GeneratedResult

# Characters encodeURIComponent leaves as-is besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def format_result(result: GeneratedResult, number: int) -> str:
    """Format one result as a numbered clipboard section."""
    return (
        f"=== PROMPT {number} ===\n\n"
        f"1️⃣ FINAL COPY\n{result.final_copy}\n\n"
        f"2️⃣ IMAGE PROMPT\n{result.image_prompt}\n\n"
        f"3️⃣ DESIGN NOTES\n{result.design_notes}\n\n"
    )


def format_all(results: list[GeneratedResult]) -> str:
    """Format all results for the clipboard, numbered from 1."""
    return "\n".join(
        format_result(result, number)
        for number, result in enumerate(results, start=1)
    )


def build_chat_url(result: GeneratedResult, model: str | None = None) -> str:
    """
    Build a chat-tool URL that pre-fills the full prompt.

    Without a model: <CHAT_BASE_URL>?q=...
    With a model:    <CHAT_MODEL_BASE_URL>?model=<model>&q=...
    """
    encoded = encode_uri_component(result.full_prompt)
    if model:
        return f"{CHAT_MODEL_BASE_URL}?model={encode_uri_component(model)}&q={encoded}"
    return f"{CHAT_BASE_URL}?q={encoded}"


def build_chat_urls(results: list[GeneratedResult], model: str | None = None) -> list[str]:
    """One URL per result, in order."""
    return [build_chat_url(result, model) for result in results]
