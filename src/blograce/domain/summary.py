"""Summary domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryRecord:
    """A saved (url, summary) pair as held by the record store."""

    id: int
    url: str
    summary: str

    @classmethod
    def from_model(cls, model) -> "SummaryRecord":
        """Create SummaryRecord from a SummaryModel row."""
        return cls(id=model.id, url=model.url, summary=model.summary)
