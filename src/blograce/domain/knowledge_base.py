"""Static knowledge base of blog URLs with precomputed results."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class KnowledgeBaseEntry:
    """Precomputed summary and Urdu translation for a known URL."""

    key: str
    summary: str
    translation: str


@dataclass(frozen=True)
class SampleLink:
    """Quick-pick button shown under the URL input."""

    label: str
    url: str


_ENTRIES = (
    KnowledgeBaseEntry(
        key="https://example.com/blog1",
        summary=(
            "This blog explores how early rising boosts productivity "
            "through structure and focus. (AI Summary)"
        ),
        translation=(
            "یہ بلاگ بتاتا ہے کہ جلدی اٹھنا کس طرح نظم و ضبط اور توجہ کے ذریعے "
            "پیداواریت کو بڑھاتا ہے۔"
        ),
    ),
    KnowledgeBaseEntry(
        key="https://example.com/blog2",
        summary=(
            "This blog discusses the impact of digital detox on mental clarity "
            "and overall well-being. (AI Summary)"
        ),
        translation=(
            "یہ بلاگ ڈیجیٹل ڈٹاکس کے ذہنی وضاحت اور مجموعی صحت پر اثرات پر روشنی ڈالتا ہے۔"
        ),
    ),
    KnowledgeBaseEntry(
        key="https://blog.hubspot.com/marketing/digital-marketing",
        summary=(
            "This blog introduces essential digital marketing strategies including "
            "SEO, content marketing, and analytics tools. (AI Summary)"
        ),
        translation=(
            "یہ بلاگ بنیادی ڈیجیٹل مارکیٹنگ حکمت عملیوں جیسے SEO، مواد کی مارکیٹنگ، "
            "اور تجزیاتی اوزاروں کا تعارف پیش کرتا ہے۔"
        ),
    ),
    KnowledgeBaseEntry(
        key="https://buffer.com/resources/social-media-calendar/",
        summary=(
            "This blog explains how to build an effective social media calendar "
            "to boost engagement and consistency. (AI Summary)"
        ),
        translation=(
            "یہ بلاگ سوشل میڈیا کیلنڈر بنانے کے طریقے کو بیان کرتا ہے تاکہ تعامل "
            "اور تسلسل کو بہتر بنایا جا سکے۔"
        ),
    ),
)

# Keys are matched verbatim: no case folding, no trailing-slash normalization
KNOWLEDGE_BASE: MappingProxyType[str, KnowledgeBaseEntry] = MappingProxyType(
    {entry.key: entry for entry in _ENTRIES}
)

SAMPLE_LINKS: tuple[SampleLink, ...] = (
    SampleLink("Early Riser Tips", "https://example.com/blog1"),
    SampleLink("Digital Detox", "https://example.com/blog2"),
    SampleLink("Digital Marketing", "https://blog.hubspot.com/marketing/digital-marketing"),
    SampleLink("Social Media Calendar", "https://buffer.com/resources/social-media-calendar/"),
)


def lookup(url: str) -> KnowledgeBaseEntry | None:
    """Return the precomputed entry for an exact URL, or None."""
    return KNOWLEDGE_BASE.get(url)
