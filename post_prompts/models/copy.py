"""Static copy pools: headlines, calls-to-action, hashtags and focus phrases."""

from dataclasses import dataclass

from .category import Category

BRAND_NAME = "Angrio Technologies"
BRAND_HASHTAGS = ["#AngrioTech", "#Innovation", "#Technology"]

POST_SIZE = "1080x1080px"


@dataclass(frozen=True)
class Headline:
    """Headline format filled with a slice of the content's leading words."""

    text: str  # "{words}" is replaced by the word slice
    start: int
    stop: int

    def render(self, content: str) -> str:
        words = content.split()[self.start:self.stop]
        return self.text.format(words=" ".join(words))


HEADLINES: list[Headline] = [
    Headline("🚀 {words} Excellence", 0, 2),
    Headline("💡 Transform Your {words}", 1, 3),
    Headline("⭐ Discover {words}", 0, 3),
    Headline("🎯 Unlock {words} Success", 2, 4),
    Headline("✨ Elevate Your {words}", 0, 2),
    Headline("🔥 Revolutionary {words}", 1, 3),
    Headline("💪 Master {words}", 0, 3),
    Headline("🌟 Premium {words}", 2, 4),
    Headline("⚡ Advanced {words}", 0, 2),
    Headline("🎪 Ultimate {words}", 1, 4),
]

CTAS: list[str] = [
    "📞 Contact Angrio Technologies Today",
    "🚀 Start Your Journey with Angrio",
    "💼 Partner with Angrio Technologies",
    "📧 Get in Touch with Our Experts",
    "🎯 Schedule Your Consultation Now",
    "✨ Join the Angrio Family",
    "💡 Discover Angrio Solutions",
    "🔗 Connect with Angrio Team",
    "📱 Reach Out to Angrio Today",
    "🌟 Experience Angrio Excellence",
]

# Motivation has no phrase of its own and falls back to GENERAL_FOCUS
CONTENT_FOCUS: dict[Category, str] = {
    Category.HIRING: "professional recruitment and career opportunities",
    Category.STATISTICS: "data visualization and business metrics",
    Category.AWARENESS: "educational and informational content",
}
GENERAL_FOCUS = "general business promotion"


def get_headline(index: int) -> Headline:
    """Get headline by index (cycles)."""
    return HEADLINES[index % len(HEADLINES)]


def get_cta(index: int) -> str:
    """Get call-to-action by index (cycles)."""
    return CTAS[index % len(CTAS)]


def get_content_focus(category: Category) -> str:
    return CONTENT_FOCUS.get(category, GENERAL_FOCUS)
