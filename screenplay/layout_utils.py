"""
Break-point helpers for measured screenplay blocks.
"""

from __future__ import annotations

from typing import Sequence

from .models import BlockType
from .pagination.page_types import BlockDimensions

_NO_BREAK_AFTER = {BlockType.SCENE_HEADING, BlockType.CHARACTER, BlockType.PARENTHETICAL}


def is_good_break_point(
    current: BlockDimensions, following: BlockDimensions | None
) -> bool:
    """Return True when a page may end after ``current``.

    A page never ends after a scene heading, character cue or
    parenthetical, nor before a block that cannot start a page.
    """

    if following is None:
        return True
    if current.type in _NO_BREAK_AFTER:
        return False
    return following.can_break_before


def optimal_break_point(dimensions: Sequence[BlockDimensions], max_height: float) -> int:
    """Return how many leading blocks to keep before a page break.

    Picks the last good break point reached before the cumulative height
    exceeds ``max_height``.

    Returns:
        Count of blocks to keep; ``len(dimensions)`` when everything fits.
    """

    height = 0.0
    last_good = 0
    for idx, dims in enumerate(dimensions):
        if height + dims.height > max_height:
            return last_good
        height += dims.height
        following = dimensions[idx + 1] if idx + 1 < len(dimensions) else None
        if is_good_break_point(dims, following):
            last_good = idx + 1
    return len(dimensions)
