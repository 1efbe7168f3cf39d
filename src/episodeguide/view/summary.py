"""Interpret catalog summary markup for terminal display.

Summaries arrive as small HTML fragments ("<p>Jon meets <b>Daenerys</b>.</p>").
The catalog is treated as a trusted source: tags are interpreted, not shown
literally. Paragraphs and line breaks become newlines, bold and italic tags
become rich styles, anything else is dropped while keeping its text.
"""

from html.parser import HTMLParser

from rich.text import Text

STYLE_TAGS = {
    "b": "bold",
    "strong": "bold",
    "i": "italic",
    "em": "italic",
    "u": "underline",
}

BLOCK_TAGS = {"p", "div", "li", "ul", "ol", "h1", "h2", "h3", "h4", "h5", "h6"}


class _SummaryParser(HTMLParser):
    """Collects text runs with rich styles from an HTML fragment."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.text = Text()
        self._styles: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag == "br":
            self.text.append("\n")
        elif tag in BLOCK_TAGS:
            self._break_paragraph()
        elif tag in STYLE_TAGS:
            self._styles.append(STYLE_TAGS[tag])

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag == "br":
            self.text.append("\n")

    def handle_endtag(self, tag: str) -> None:
        if tag in BLOCK_TAGS:
            self._break_paragraph()
        elif tag in STYLE_TAGS and STYLE_TAGS[tag] in self._styles:
            # Remove the innermost matching style
            index = len(self._styles) - 1 - self._styles[::-1].index(STYLE_TAGS[tag])
            del self._styles[index]

    def handle_data(self, data: str) -> None:
        style = " ".join(self._styles) or None
        self.text.append(data, style=style)

    def _break_paragraph(self) -> None:
        plain = self.text.plain
        if plain and not plain.endswith("\n\n"):
            self.text.append("\n" if plain.endswith("\n") else "\n\n")


def summary_to_text(summary: str) -> Text:
    """Convert summary markup to styled rich Text.

    Args:
        summary: HTML fragment from the catalog (may be empty)

    Returns:
        Text with surrounding whitespace removed
    """
    parser = _SummaryParser()
    parser.feed(summary)
    parser.close()
    text = parser.text
    text.rstrip()
    # Text has no lstrip; trim leading newlines left by an opening block tag
    leading = len(text.plain) - len(text.plain.lstrip())
    if leading:
        text = text[leading:]
    return text


def summary_to_plain(summary: str) -> str:
    """Convert summary markup to plain text (used for JSON output)."""
    return summary_to_text(summary).plain
