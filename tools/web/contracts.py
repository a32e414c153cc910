"""Data contracts for the web tools."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """One entry from the search provider, reduced to what the agent needs."""

    title: str | None
    link: str | None

    def to_dict(self) -> dict[str, str]:
        """Fields the provider did not send are left out, not emitted as null."""
        fields = {"title": self.title, "link": self.link}
        return {key: value for key, value in fields.items() if value is not None}
