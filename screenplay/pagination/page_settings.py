"""Page geometry, unit conversions, and the monospace wrap estimator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics

from ..cleaning import split_words
from .page_constants import DEFAULT_DPI, MM_PER_INCH, MM_PER_PT, PT_PER_MM, TWIPS_PER_PT


def _finite(value: float) -> float:
    """Return ``value`` as a float, or 0.0 when it is not finite."""

    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def mm_to_pt(value: float) -> float:
    """Convert millimetres to points.

    Example:
        >>> round(mm_to_pt(25.4), 2)
        72.0
    """

    return _finite(value) * PT_PER_MM


def pt_to_mm(value: float) -> float:
    """Convert points to millimetres."""

    return _finite(value) * MM_PER_PT


def px_to_mm(value: float, dpi: float = DEFAULT_DPI) -> float:
    """Convert screen pixels to millimetres at ``dpi``.

    Example:
        >>> round(px_to_mm(96), 2)
        25.4
    """

    dpi = _finite(dpi)
    if dpi <= 0:
        return 0.0
    return _finite(value) * MM_PER_INCH / dpi


def mm_to_px(value: float, dpi: float = DEFAULT_DPI) -> float:
    """Convert millimetres to screen pixels at ``dpi``."""

    return _finite(value) * _finite(dpi) / MM_PER_INCH


def pt_to_twips(value: float) -> float:
    """Convert points to twips (1/20 pt).

    Example:
        >>> pt_to_twips(12)
        240.0
    """

    return _finite(value) * TWIPS_PER_PT


def twips_to_pt(value: float) -> float:
    """Convert twips to points."""

    return _finite(value) / TWIPS_PER_PT


def mm_to_twips(value: float) -> float:
    """Convert millimetres to twips."""

    return pt_to_twips(mm_to_pt(value))


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Geometry constants used during pagination.

    Lengths on the page are kept in millimetres; typography is in points.
    The defaults describe a US-letter screenplay page set in 12 pt Courier.

    Example:
        >>> geometry = PageGeometry()
        >>> round(geometry.content_width_mm, 1)
        152.5
        >>> round(geometry.char_width_pt, 2)
        7.2
    """

    page_width_mm: float = 216.0
    page_height_mm: float = 279.0
    margin_top_mm: float = 25.4
    margin_bottom_mm: float = 25.4
    margin_left_mm: float = 38.1
    margin_right_mm: float = 25.4
    font_name: str = "Courier"
    font_size: float = 12.0
    line_height: float = 12.0
    characters_per_inch: float = 10.0

    @classmethod
    def a4(cls) -> "PageGeometry":
        """Return the A4 layout with 1.5 line spacing.

        Returns:
            PageGeometry for a 210 x 297 mm page.
        """

        return cls(
            page_width_mm=210.0,
            page_height_mm=297.0,
            margin_top_mm=25.0,
            margin_bottom_mm=25.0,
            margin_left_mm=20.0,
            margin_right_mm=20.0,
            line_height=18.0,
        )

    @classmethod
    def from_pagesize(
        cls, pagesize: Tuple[float, float] = A4, **overrides: object
    ) -> "PageGeometry":
        """Return geometry for a ReportLab page size given in points.

        Args:
            pagesize: ``(width, height)`` in points, e.g. ``reportlab.lib.pagesizes.LETTER``.
            overrides: Any other PageGeometry field.
        Returns:
            PageGeometry with the page size converted to millimetres.
        Raises:
            ValueError: If ``overrides`` also sets the page size.
        """

        clashing = sorted({"page_width_mm", "page_height_mm"} & overrides.keys())
        if clashing:
            raise ValueError(
                f"Page size comes from pagesize; drop {', '.join(clashing)}"
            )
        width, height = pagesize
        return cls(
            page_width_mm=pt_to_mm(width),
            page_height_mm=pt_to_mm(height),
            **overrides,
        )

    @property
    def content_width_mm(self) -> float:
        """Return the width inside the left and right margins."""

        return self.page_width_mm - self.margin_left_mm - self.margin_right_mm

    @property
    def content_height_mm(self) -> float:
        """Return the height inside the top and bottom margins."""

        return self.page_height_mm - self.margin_top_mm - self.margin_bottom_mm

    @property
    def content_width_pt(self) -> float:
        return mm_to_pt(self.content_width_mm)

    @property
    def content_height_pt(self) -> float:
        return mm_to_pt(self.content_height_mm)

    @property
    def content_height_twips(self) -> float:
        return pt_to_twips(self.content_height_pt)

    @property
    def char_width_pt(self) -> float:
        """Return the advance width of one glyph of the monospace font.

        Returns:
            Width in points taken from the font's metrics.
        """

        return pdfmetrics.stringWidth("M", self.font_name, self.font_size)

    @property
    def char_offset_pt(self) -> float:
        """Return the length of one character column used by margin offsets."""

        return 72.0 / self.characters_per_inch

    def text_width_pt(self, text: str) -> float:
        """Return the estimated rendered width of ``text``."""

        return len(text) * self.char_width_pt

    def estimate_line_count(self, text: str, max_width_pt: float) -> int:
        """Return how many lines ``text`` wraps to at ``max_width_pt``.

        See :func:`estimate_line_count`.
        """

        return estimate_line_count(
            words=split_words(text),
            max_width=max_width_pt,
            char_width=self.char_width_pt,
        )


def estimate_line_count(
    *, words: Sequence[str], max_width: float, char_width: float
) -> int:
    """Greedy word-wrap simulation over fixed-width glyphs.

    A line takes words while the line width plus one space plus the next
    word stays within ``max_width``. A word wider than the line is never
    split and occupies a line by itself.

    Args:
        words: Words in reading order.
        max_width: Available line width; non-finite values count as zero.
        char_width: Advance width of one glyph.
    Returns:
        Line count, at least 1.

    Example:
        >>> estimate_line_count(words=["aa", "bb", "cc"], max_width=5, char_width=1)
        2
        >>> estimate_line_count(words=[], max_width=5, char_width=1)
        1
    """

    max_width = max(0.0, _finite(max_width))
    char_width = max(0.0, _finite(char_width))
    space = char_width
    lines = 1
    current = 0.0
    for word in words:
        width = len(word) * char_width
        if current == 0.0:
            current = width if width > 0 else space
            continue
        if current + space + width <= max_width:
            current += space + width
        else:
            lines += 1
            current = width if width > 0 else space
    return lines
