"""Data structures for pagination planning and reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Protocol, Sequence, Tuple

from ..models import BlockType, ContentBlock
from .page_constants import TWIPS_PER_PT


class _ProgressTracker(Protocol):
    """Protocol for block measurement progress updates."""

    def update(self, n: int | float = 1) -> object:
        """Advance the progress tracker by ``n``."""


class IssueKind(str, Enum):
    """Categories of pagination diagnostics."""

    OVERFLOW = "overflow"
    NEGATIVE_REMAINING = "negative_remaining"
    EMPTY_PAGE = "empty_page"
    ORPHANED_CHARACTER = "orphaned_character"
    ORPHANED_SCENE_HEADING = "orphaned_scene_heading"
    OVERSIZED_GROUP = "oversized_group"
    CONFIGURATION = "configuration"
    TITLE_PAGE = "title_page"
    PAGE_NUMBERING = "page_numbering"


@dataclass(slots=True, frozen=True)
class Issue:
    """One advisory diagnostic about a pagination run.

    Args:
        kind: Category of the issue.
        page_number: Page the issue refers to, or None for document-wide issues.
        message: Human-readable description.
        excess: Amount in points by which a limit was exceeded, when relevant.
    """

    kind: IssueKind
    page_number: int | None
    message: str
    excess: float = 0.0

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True, frozen=True)
class BlockDimensions:
    """Measured vertical extent of a block plus its grouping flags.

    Args:
        block: The measured block.
        line_count: Wrapped line count, at least 1.
        height: Line box height plus spacing before and after, in points.
        spacing_before: Space above the block, in points.
        spacing_after: Space below the block, in points.
        width: Text width the block was wrapped at, in points.
        can_break_before: Copied from the block type's rule.
        must_keep_with_next: Copied from the block type's rule.
    """

    block: ContentBlock
    line_count: int
    height: float
    spacing_before: float
    spacing_after: float
    width: float
    can_break_before: bool
    must_keep_with_next: bool

    @property
    def block_id(self) -> str:
        return self.block.id

    @property
    def type(self) -> BlockType:
        return self.block.type


@dataclass(slots=True, frozen=True)
class KeepTogetherGroup:
    """Contiguous run of blocks that paginates as one unit."""

    start: int
    members: Tuple[BlockDimensions, ...]

    @property
    def height(self) -> float:
        return sum(member.height for member in self.members)

    @property
    def stop(self) -> int:
        """Return the index just past the last member."""

        return self.start + len(self.members)

    def __len__(self) -> int:
        return len(self.members)


@dataclass(slots=True, frozen=True)
class BlockHeight:
    """Debug record of one placed block."""

    block_id: str
    height: float
    type: BlockType


@dataclass(slots=True)
class Page:
    """A single output page.

    Args:
        page_number: 1-based page number, assigned at emission.
        blocks: Blocks placed on the page, in input order.
        used_height: Sum of placed block heights, in points.
        remaining_height: Content height minus ``used_height``; negative only
            after an oversized keep-together group was split.
        is_title_page: True for a cover page carrying no blocks.
        block_heights: Per-block measurements when debugging is enabled.
    """

    page_number: int
    blocks: List[ContentBlock]
    used_height: float
    remaining_height: float
    is_title_page: bool = False
    block_heights: List[BlockHeight] | None = None

    def in_twips(self) -> Tuple[float, float]:
        """Return ``(used, remaining)`` in twips.

        Example:
            >>> Page(1, [], 12.0, 3.0).in_twips()
            (240.0, 60.0)
        """

        return self.used_height * TWIPS_PER_PT, self.remaining_height * TWIPS_PER_PT


@dataclass(slots=True)
class ValidationReport:
    """Result of checking pages against pagination invariants."""

    issues: List[Issue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def messages(self) -> List[str]:
        """Return the issue messages in report order."""

        return [issue.message for issue in self.issues]

    def of_kind(self, kind: IssueKind) -> List[Issue]:
        """Return the issues of one category."""

        return [issue for issue in self.issues if issue.kind == kind]


@dataclass(slots=True)
class PackResult:
    """Pages produced by the packer and the degradations it had to apply."""

    pages: List[Page]
    warnings: List[Issue]


@dataclass(slots=True)
class PaginationResult:
    """Outcome of the full dimensions, packing, and validation pipeline."""

    pages: List[Page]
    warnings: List[Issue]
    report: ValidationReport

    @property
    def page_count(self) -> int:
        return len(self.pages)


@dataclass(slots=True, frozen=True)
class DocumentStats:
    """Summary counts for a paginated screenplay."""

    page_count: int
    word_count: int
    character_count: int


def flatten_blocks(pages: Sequence[Page]) -> List[ContentBlock]:
    """Return every block in page order.

    Example:
        >>> flatten_blocks([])
        []
    """

    result: List[ContentBlock] = []
    for page in pages:
        result.extend(page.blocks)
    return result
