"""Keep-together grouping of adjacent blocks."""

from __future__ import annotations

from typing import Iterator, Sequence

from .page_types import BlockDimensions, KeepTogetherGroup


def group_from(
    *, dimensions: Sequence[BlockDimensions], start: int
) -> KeepTogetherGroup:
    """Return the maximal keep-together run starting at ``start``.

    Walks forward while the current block must stay with the next one.
    Never looks backward; callers only invoke it at a group boundary.

    Args:
        dimensions: Measured blocks in reading order.
        start: Index of the first block of the group.
    Returns:
        KeepTogetherGroup with at least one member.
    """

    stop = start
    while dimensions[stop].must_keep_with_next and stop + 1 < len(dimensions):
        stop += 1
    return KeepTogetherGroup(start=start, members=tuple(dimensions[start : stop + 1]))


def group_height(group: KeepTogetherGroup) -> float:
    """Return the summed height of a group's members."""

    return group.height


def iter_groups(dimensions: Sequence[BlockDimensions]) -> Iterator[KeepTogetherGroup]:
    """Yield the groups that partition ``dimensions``, in order."""

    idx = 0
    while idx < len(dimensions):
        group = group_from(dimensions=dimensions, start=idx)
        yield group
        idx = group.stop
