"""Pagination flow orchestration for screenplay blocks."""

from __future__ import annotations

from typing import List, Sequence

from ..cleaning import split_words
from ..models import ContentBlock, TitlePageInfo
from .page_dimensions import dimensions_for_blocks
from .page_packer import pack_pages
from .page_settings import PageGeometry
from .page_standards import FormattingStandards
from .page_support import _debug, _warn_issues
from .page_types import DocumentStats, Issue, Page, PaginationResult, _ProgressTracker
from .page_validation import validate_pages, validate_title_info, validate_title_pages


def _resolve_standards(
    *, geometry: PageGeometry | None, standards: FormattingStandards | None
) -> FormattingStandards:
    """Return ``standards`` or the industry table for ``geometry``."""

    if standards is not None:
        return standards
    return FormattingStandards.industry(geometry)


def _pack(
    *,
    blocks: Sequence[ContentBlock],
    standards: FormattingStandards,
    debug: bool,
    first_page_number: int,
    progress: _ProgressTracker | None,
) -> tuple[List[Page], List[Issue]]:
    """Measure and pack ``blocks``; warn about oversized groups."""

    dimensions = dimensions_for_blocks(
        blocks=blocks, standards=standards, progress=progress
    )
    packed = pack_pages(
        dimensions=dimensions,
        content_height=standards.geometry.content_height_pt,
        first_page_number=first_page_number,
        debug=debug,
    )
    _warn_issues(issues=packed.warnings)
    _debug(
        msg=(
            f"[paginate] blocks={len(blocks)} pages={len(packed.pages)} "
            f"capacity={standards.geometry.content_height_pt:.2f}pt"
        )
    )
    return packed.pages, packed.warnings


def paginate_blocks(
    blocks: Sequence[ContentBlock],
    *,
    geometry: PageGeometry | None = None,
    standards: FormattingStandards | None = None,
    debug: bool = False,
    first_page_number: int = 1,
    progress: _ProgressTracker | None = None,
) -> PaginationResult:
    """Split ``blocks`` into pages and validate the result.

    Args:
        blocks: Blocks in reading order. Never modified.
        geometry: Page geometry; ignored when ``standards`` is given.
        standards: Formatting table; defaults to the industry table.
        debug: Attach per-block heights to every page.
        first_page_number: Number given to the first emitted page.
        progress: Optional tracker advanced once per measured block.
    Returns:
        PaginationResult with pages, warnings, and the validation report.

    Example:
        >>> from screenplay.models import BlockType
        >>> result = paginate_blocks([ContentBlock("b1", BlockType.ACTION, "Rain.")])
        >>> result.page_count, result.report.is_valid
        (1, True)
    """

    standards = _resolve_standards(geometry=geometry, standards=standards)
    pages, warnings = _pack(
        blocks=blocks,
        standards=standards,
        debug=debug,
        first_page_number=first_page_number,
        progress=progress,
    )
    report = validate_pages(pages, content_height=standards.geometry.content_height_pt)
    return PaginationResult(
        pages=pages,
        warnings=list(standards.configuration_issues) + warnings,
        report=report,
    )


def has_title_page(info: TitlePageInfo | None) -> bool:
    """Return True when ``info`` carries a non-blank title."""

    return bool(info is not None and info.title and info.title.strip())


def paginate_with_title_page(
    blocks: Sequence[ContentBlock],
    info: TitlePageInfo,
    *,
    geometry: PageGeometry | None = None,
    standards: FormattingStandards | None = None,
    debug: bool = False,
    progress: _ProgressTracker | None = None,
) -> PaginationResult:
    """Paginate ``blocks`` behind a title page numbered 1.

    Content pages are numbered from 2 as they are emitted. Problems with
    ``info`` are reported as warnings and do not stop pagination.

    Args:
        blocks: Blocks in reading order.
        info: Cover page details.
        geometry: Page geometry; ignored when ``standards`` is given.
        standards: Formatting table; defaults to the industry table.
        debug: Attach per-block heights to every page.
        progress: Optional tracker advanced once per measured block.
    Returns:
        PaginationResult whose first page is the title page.
    """

    standards = _resolve_standards(geometry=geometry, standards=standards)
    title_warnings = validate_title_info(info)
    _warn_issues(issues=title_warnings)
    capacity = standards.geometry.content_height_pt
    title_page = Page(
        page_number=1,
        blocks=[],
        used_height=capacity,
        remaining_height=0.0,
        is_title_page=True,
        block_heights=[] if debug else None,
    )
    content_pages, warnings = _pack(
        blocks=blocks,
        standards=standards,
        debug=debug,
        first_page_number=2,
        progress=progress,
    )
    pages = [title_page] + content_pages
    report = validate_title_pages(pages, content_height=capacity)
    return PaginationResult(
        pages=pages,
        warnings=list(standards.configuration_issues) + title_warnings + warnings,
        report=report,
    )


def total_page_count(
    blocks: Sequence[ContentBlock],
    info: TitlePageInfo | None = None,
    *,
    geometry: PageGeometry | None = None,
    standards: FormattingStandards | None = None,
) -> int:
    """Return the number of pages, counting a title page when one applies."""

    result = paginate_blocks(blocks, geometry=geometry, standards=standards)
    if has_title_page(info):
        return result.page_count + 1
    return result.page_count


def document_stats(
    blocks: Sequence[ContentBlock], pages: Sequence[Page]
) -> DocumentStats:
    """Return page, word, and character counts.

    Example:
        >>> from screenplay.models import BlockType
        >>> document_stats([ContentBlock("b1", BlockType.ACTION, "Two words")], [])
        DocumentStats(page_count=0, word_count=2, character_count=9)
    """

    return DocumentStats(
        page_count=len(pages),
        word_count=sum(len(split_words(block.content)) for block in blocks),
        character_count=sum(len(block.content) for block in blocks),
    )
