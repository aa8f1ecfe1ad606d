"""Greedy page packing of keep-together groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from ..models import ContentBlock
from .page_constants import EPSILON
from .page_grouping import group_from
from .page_support import _debug
from .page_types import (
    BlockDimensions,
    BlockHeight,
    Issue,
    IssueKind,
    KeepTogetherGroup,
    PackResult,
    Page,
)


@dataclass(slots=True)
class _OpenPage:
    """Mutable state for the page currently being filled."""

    page_number: int
    blocks: List[ContentBlock] = field(default_factory=list)
    heights: List[BlockHeight] = field(default_factory=list)
    used: float = 0.0

    def add(self, *, dims: BlockDimensions) -> None:
        self.blocks.append(dims.block)
        self.heights.append(
            BlockHeight(block_id=dims.block_id, height=dims.height, type=dims.type)
        )
        self.used += dims.height


class PagePacker:
    """Assign measured blocks to pages in a single forward pass.

    Groups are placed whole when they fit; a group taller than a full page
    is placed one block at a time and reported as an ``OVERSIZED_GROUP``
    warning.

    Example:
        >>> PagePacker(content_height=100.0).pack(dimensions=[]).pages
        []
    """

    def __init__(
        self,
        *,
        content_height: float,
        first_page_number: int = 1,
        debug: bool = False,
    ) -> None:
        self.content_height = content_height
        self.first_page_number = first_page_number
        self.debug = debug

    def _fits(self, *, used: float, height: float) -> bool:
        return used + height <= self.content_height + EPSILON

    def pack(self, *, dimensions: Sequence[BlockDimensions]) -> PackResult:
        """Return pages for ``dimensions`` in input order.

        Args:
            dimensions: Measured blocks in reading order.
        Returns:
            PackResult with emitted pages and degradation warnings.
        """

        pages: List[Page] = []
        warnings: List[Issue] = []
        current = _OpenPage(page_number=self.first_page_number)
        idx = 0
        while idx < len(dimensions):
            group = group_from(dimensions=dimensions, start=idx)
            height = group.height
            if not self._fits(used=current.used, height=height):
                if current.blocks:
                    current = self._close(page=current, pages=pages)
                if not self._fits(used=current.used, height=height):
                    warnings.append(self._oversized_issue(group=group, page=current))
                    current = self._place_split(
                        group=group, page=current, pages=pages
                    )
                    idx = group.stop
                    continue
            for member in group.members:
                current.add(dims=member)
            idx = group.stop
        if current.blocks:
            self._close(page=current, pages=pages)
        return PackResult(pages=pages, warnings=warnings)

    def _place_split(
        self, *, group: KeepTogetherGroup, page: _OpenPage, pages: List[Page]
    ) -> _OpenPage:
        """Place an oversized group one block at a time."""

        for member in group.members:
            if page.blocks and not self._fits(used=page.used, height=member.height):
                page = self._close(page=page, pages=pages)
            page.add(dims=member)
        return page

    def _close(self, *, page: _OpenPage, pages: List[Page]) -> _OpenPage:
        """Emit ``page`` and return a fresh page numbered after it."""

        remaining = self.content_height - page.used
        pages.append(
            Page(
                page_number=page.page_number,
                blocks=list(page.blocks),
                used_height=page.used,
                remaining_height=remaining,
                block_heights=list(page.heights) if self.debug else None,
            )
        )
        _debug(
            msg=(
                f"[paginate] page {page.page_number}: blocks={len(page.blocks)} "
                f"used={page.used:.2f} remaining={remaining:.2f}"
            )
        )
        return _OpenPage(page_number=page.page_number + 1)

    def _oversized_issue(self, *, group: KeepTogetherGroup, page: _OpenPage) -> Issue:
        excess = group.height - self.content_height
        return Issue(
            kind=IssueKind.OVERSIZED_GROUP,
            page_number=page.page_number,
            message=(
                f"Page {page.page_number}: keep-together group of {len(group)} block(s) "
                f"starting at {group.members[0].block_id} is {group.height:.1f}pt, "
                f"{excess:.1f}pt taller than the page; split across pages"
            ),
            excess=excess,
        )


def pack_pages(
    *,
    dimensions: Sequence[BlockDimensions],
    content_height: float,
    first_page_number: int = 1,
    debug: bool = False,
) -> PackResult:
    """Pack measured blocks into pages of ``content_height`` points."""

    packer = PagePacker(
        content_height=content_height,
        first_page_number=first_page_number,
        debug=debug,
    )
    return packer.pack(dimensions=dimensions)
