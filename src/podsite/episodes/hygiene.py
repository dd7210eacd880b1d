"""Typographic hygiene checks for episode documents."""

from pathlib import Path

from podsite.utils.errors import HygieneViolationError

# Looks like a hyphen but is neither "-" nor an en/em dash
ABNORMAL_DASHES = ("\u2011",)

SMART_QUOTES = ("\u201c", "\u201d", "\u2018", "\u2019")

_CATEGORIES = (
    ("dash", "abnormal dash", ABNORMAL_DASHES),
    ("quote", "smart quote", SMART_QUOTES),
)


def check_hygiene(content: str, path: Path) -> None:
    """Reject documents containing disallowed glyphs.

    The whole text is checked, front matter included. Dashes are checked
    before quotes, so a document with both reports the dash.

    Args:
        content: Full document text
        path: Document path, used in the error message

    Raises:
        HygieneViolationError: On the first disallowed glyph found
    """
    for category, label, glyphs in _CATEGORIES:
        found = [(content.find(glyph), glyph) for glyph in glyphs]
        found = [(pos, glyph) for pos, glyph in found if pos != -1]
        if not found:
            continue

        pos, glyph = min(found)
        line = content.count("\n", 0, pos) + 1
        raise HygieneViolationError(
            f"Found {label} U+{ord(glyph):04X} at line {line} in {path}",
            path,
            category=category,
        )
