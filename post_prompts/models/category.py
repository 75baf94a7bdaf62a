"""Post category - coarse intent of a post description."""

from enum import Enum


class Category(str, Enum):
    HIRING = "hiring"
    STATISTICS = "statistics"
    AWARENESS = "awareness"
    MOTIVATION = "motivation"
    GENERAL = "general"


# Checked in order, first match wins
CATEGORY_KEYWORDS: list[tuple[Category, tuple[str, ...]]] = [
    (Category.HIRING, ("hiring", "job", "recruit")),
    (Category.STATISTICS, ("stat", "data", "number")),
    (Category.AWARENESS, ("awareness", "education", "tip")),
    (Category.MOTIVATION, ("motivation", "inspire", "quote")),
]


def detect_category(content: str) -> Category:
    """
    Classify a post description by keyword substring match.

    Example: "We are hiring a telecaller" -> Category.HIRING
    """
    lower = content.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return category
    return Category.GENERAL
