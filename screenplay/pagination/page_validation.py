"""Post-hoc checks over packed pages."""

from __future__ import annotations

from typing import List, Sequence

from ..models import BlockType, TitlePageInfo
from .page_constants import EPSILON
from .page_types import Issue, IssueKind, Page, ValidationReport

HEADING_ORPHAN_WINDOW = 2
MAX_TITLE_LENGTH = 100
MAX_AUTHOR_LENGTH = 80
MAX_DESCRIPTION_LENGTH = 500


def validate_pages(
    pages: Sequence[Page],
    *,
    content_height: float,
    heading_orphan_window: int = HEADING_ORPHAN_WINDOW,
) -> ValidationReport:
    """Check pages for overflow, empty pages, and orphaned cues.

    The scene-heading check is a heuristic: a heading within the last
    ``heading_orphan_window`` positions of a page is flagged.

    Args:
        pages: Pages in emission order. Never modified.
        content_height: Page capacity in points.
        heading_orphan_window: Trailing positions in which a scene heading is flagged.
    Returns:
        ValidationReport listing every issue found.
    """

    issues: List[Issue] = []
    for page in pages:
        issues.extend(
            _page_issues(
                page=page,
                content_height=content_height,
                heading_orphan_window=heading_orphan_window,
            )
        )
    return ValidationReport(issues=issues)


def _page_issues(
    *, page: Page, content_height: float, heading_orphan_window: int
) -> List[Issue]:
    number = page.page_number
    issues: List[Issue] = []
    if page.used_height > content_height + EPSILON:
        excess = page.used_height - content_height
        issues.append(
            Issue(
                kind=IssueKind.OVERFLOW,
                page_number=number,
                message=(
                    f"Page {number}: content height {page.used_height:.1f}pt exceeds "
                    f"page height {content_height:.1f}pt by {excess:.1f}pt"
                ),
                excess=excess,
            )
        )
    if page.remaining_height < -EPSILON:
        issues.append(
            Issue(
                kind=IssueKind.NEGATIVE_REMAINING,
                page_number=number,
                message=f"Page {number}: negative remaining height {page.remaining_height:.1f}pt",
                excess=-page.remaining_height,
            )
        )
    if not page.blocks:
        if not page.is_title_page:
            issues.append(
                Issue(
                    kind=IssueKind.EMPTY_PAGE,
                    page_number=number,
                    message=f"Page {number}: empty page",
                )
            )
        return issues
    if page.blocks[-1].type == BlockType.CHARACTER:
        issues.append(
            Issue(
                kind=IssueKind.ORPHANED_CHARACTER,
                page_number=number,
                message=f"Page {number}: character name orphaned at bottom of page",
            )
        )
    tail_start = max(0, len(page.blocks) - heading_orphan_window)
    for block in page.blocks[tail_start:]:
        if block.type == BlockType.SCENE_HEADING:
            issues.append(
                Issue(
                    kind=IssueKind.ORPHANED_SCENE_HEADING,
                    page_number=number,
                    message=f"Page {number}: scene heading near bottom of page",
                )
            )
    return issues


def validate_title_info(info: TitlePageInfo) -> List[Issue]:
    """Return problems with the cover page details.

    Example:
        >>> [str(issue) for issue in validate_title_info(TitlePageInfo(title=" "))]
        ['Title is required for title page']
    """

    problems: List[str] = []
    if not info.title or not info.title.strip():
        problems.append("Title is required for title page")
    if info.title and len(info.title) > MAX_TITLE_LENGTH:
        problems.append(f"Title is too long (max {MAX_TITLE_LENGTH} characters)")
    if info.author and len(info.author) > MAX_AUTHOR_LENGTH:
        problems.append(f"Author name is too long (max {MAX_AUTHOR_LENGTH} characters)")
    if info.description and len(info.description) > MAX_DESCRIPTION_LENGTH:
        problems.append(
            f"Description is too long (max {MAX_DESCRIPTION_LENGTH} characters)"
        )
    return [
        Issue(kind=IssueKind.TITLE_PAGE, page_number=None, message=message)
        for message in problems
    ]


def validate_title_pages(
    pages: Sequence[Page],
    *,
    content_height: float,
    heading_orphan_window: int = HEADING_ORPHAN_WINDOW,
) -> ValidationReport:
    """Check a page list that should open with a title page.

    Args:
        pages: Pages in emission order, title page first.
        content_height: Page capacity in points.
        heading_orphan_window: Passed to :func:`validate_pages`.
    Returns:
        ValidationReport with title-page, numbering, and standard issues.
    """

    issues: List[Issue] = []
    title_pages = [page for page in pages if page.is_title_page]
    if not title_pages:
        issues.append(_title_issue(page_number=None, message="No title page found"))
    for page in title_pages:
        if page.page_number != 1:
            issues.append(
                _title_issue(
                    page_number=page.page_number,
                    message=f"Title page should be page 1, found page {page.page_number}",
                )
            )
        if page.blocks:
            issues.append(
                _title_issue(
                    page_number=page.page_number,
                    message="Title page should not contain screenplay blocks",
                )
            )

    content_pages = [page for page in pages if not page.is_title_page]
    if not content_pages:
        issues.append(
            Issue(
                kind=IssueKind.PAGE_NUMBERING,
                page_number=None,
                message="No content pages found",
            )
        )
    for idx, page in enumerate(content_pages):
        expected = idx + 2
        if page.page_number != expected:
            issues.append(
                Issue(
                    kind=IssueKind.PAGE_NUMBERING,
                    page_number=page.page_number,
                    message=(
                        f"Content page {idx + 1} has incorrect page number: "
                        f"{page.page_number}, expected {expected}"
                    ),
                )
            )

    standard = validate_pages(
        content_pages,
        content_height=content_height,
        heading_orphan_window=heading_orphan_window,
    )
    issues.extend(standard.issues)
    return ValidationReport(issues=issues)


def _title_issue(*, page_number: int | None, message: str) -> Issue:
    return Issue(kind=IssueKind.TITLE_PAGE, page_number=page_number, message=message)
