"""First-sentence summary generator."""

SUMMARY_SUFFIX = "(AI Summary)"

# Stand-in article used for every URL missing from the knowledge base
FALLBACK_CONTENT = (
    "Mindfulness has become a major focus in recent years. "
    "It helps people manage stress, increase focus, and improve emotional health."
)


def summarize(content: str) -> str:
    """Return the first sentence of content followed by the summary marker.

    The sentence keeps its terminating period when there is one; content
    without any period is used whole.

    Examples:
        >>> summarize("A. B. C.")
        'A. (AI Summary)'
        >>> summarize("no period here")
        'no period here (AI Summary)'
    """
    first, period, _ = content.partition(".")
    sentence = first.strip() + period
    if not sentence:
        return SUMMARY_SUFFIX
    return f"{sentence} {SUMMARY_SUFFIX}"
