"""
Fixed-width text layout for the Book of Records screens.

A page is a run of 40-column lines concatenated without separators,
at most 15 lines tall.
"""

from bookofrecords.core.exceptions import PageLayoutError

LINE_WIDTH = 40
PAGE_LINES = 15
BLANK_LINE = " " * LINE_WIDTH


def pad(text: str, center: bool = False, width: int = LINE_WIDTH) -> str:
    """
    Fit text into exactly ``width`` columns, space filled.

    Left aligned by default. Centered text starts at column
    ``floor((width - len(text)) / 2)``. Text longer than the line is cut.
    """
    if center:
        start = max(0, (width - len(text)) // 2)
        text = " " * start + text
    return text[:width].ljust(width)


def page_lines(page: str) -> list[str]:
    """Split a page back into its 40-column lines."""
    return [page[i:i + LINE_WIDTH] for i in range(0, len(page), LINE_WIDTH)]


def pad_page(page: str) -> str:
    """Fill a page with blank lines up to a full 15-line screen."""
    if len(page) % LINE_WIDTH != 0:
        raise PageLayoutError(f"Page length {len(page)} is not a multiple of {LINE_WIDTH}")

    lines = len(page) // LINE_WIDTH
    if lines > PAGE_LINES:
        raise PageLayoutError(f"Page has {lines} lines, the screen holds {PAGE_LINES}")

    return page + BLANK_LINE * (PAGE_LINES - lines)
