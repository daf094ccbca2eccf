"""Word-for-word English to Urdu translation over a fixed vocabulary."""

import re
from types import MappingProxyType

URDU_DICTIONARY: MappingProxyType[str, str] = MappingProxyType(
    {
        "this": "یہ",
        "blog": "بلاگ",
        "discusses": "بیان کرتا ہے",
        "how": "کیسے",
        "daily": "روزانہ",
        "mindfulness": "ذہنی سکون",
        "practices": "مشقیں",
        "like": "جیسے",
        "meditation": "مراقبہ",
        "improve": "بہتر بناتی ہیں",
        "mental": "ذہنی",
        "health": "صحت",
        "and": "اور",
        "reduce": "کم کرتی ہیں",
        "stress": "تناؤ",
    }
)

_NON_LETTERS = re.compile(r"[^a-z]")


def lookup_key(token: str) -> str:
    """Normalize a token to its dictionary key (lowercase ASCII letters only)."""
    return _NON_LETTERS.sub("", token.lower())


def translate(text: str) -> str:
    """Translate text word by word, keeping unknown tokens verbatim.

    Only the single space character separates tokens; tabs and newlines stay
    inside their token. Punctuation and casing of a matched token are lost,
    those of an unmatched token are kept.
    """
    return " ".join(URDU_DICTIONARY.get(lookup_key(token), token) for token in text.split(" "))
