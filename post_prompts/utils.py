def to_hashtag(text: str) -> str:
    """Convert text to a hashtag: no spaces, case kept.

    Example: "Modern Card" -> "#ModernCard"
    """
    return "#" + text.replace(" ", "")
