import os
from dotenv import load_dotenv

load_dotenv()


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


# Chat tool URLs - loaded from .env
CHAT_BASE_URL = os.getenv("CHAT_BASE_URL", "https://chatgpt.com/")
CHAT_MODEL_BASE_URL = os.getenv("CHAT_MODEL_BASE_URL", "https://chat.openai.com/")

# Model selector (only changes the outbound URL)
MODELS: dict[str, str] = {
    "gpt-4o": "GPT-4o (Recommended)",
    "gpt-3.5": "GPT-3.5 Turbo",
}
MODEL_HINTS: dict[str, str] = {
    "gpt-4o": "Advanced model for richer, more detailed prompts",
    "gpt-3.5": "Faster model for quick prompt generation",
}
DEFAULT_MODEL = os.getenv("DEFAULT_MODEL", "gpt-4o")

# Delay policy (seconds)
GENERATION_DELAY = _get_float("GENERATION_DELAY", 2.0)
TAB_STAGGER = _get_float("TAB_STAGGER", 0.3)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Quantity bounds for one batch
MIN_QUANTITY = 1
MAX_QUANTITY = 10
