"""Search result domain entity.

A completion suggestion for the text the user typed. Batches of these
replace each other as the query changes; a single result is never mutated.
"""

from dataclasses import dataclass, field

from geosearch.domain.value_objects.core import HighlightSpan


def _segments(text: str, span: HighlightSpan | None) -> list[tuple[str, bool]]:
    """Split text into (fragment, highlighted) pieces around span."""
    matched = span.to_range(text) if span is not None else None
    if matched is None or len(matched) == 0:
        return [(text, False)] if text else []
    pieces = [
        (text[: matched.start], False),
        (text[matched.start : matched.stop], True),
        (text[matched.stop :], False),
    ]
    return [piece for piece in pieces if piece[0]]


@dataclass(frozen=True)
class SearchResult:
    """Completion suggestion with optional highlight spans.

    id is derived from title and subtitle, so two suggestions with the same
    title and subtitle share an id.
    """

    title: str
    subtitle: str
    title_highlight: HighlightSpan | None = None
    subtitle_highlight: HighlightSpan | None = None
    id: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", f"{self.title}-{self.subtitle}")

    def __str__(self) -> str:
        return f"SearchResult({self.title}, {self.subtitle})"

    def highlighted_title(self) -> list[tuple[str, bool]]:
        """Title split into (text, is_highlighted) segments for display."""
        return _segments(self.title, self.title_highlight)

    def highlighted_subtitle(self) -> list[tuple[str, bool]]:
        """Subtitle split into (text, is_highlighted) segments for display."""
        return _segments(self.subtitle, self.subtitle_highlight)
