"""Height measurement for individual screenplay blocks."""

from __future__ import annotations

from typing import List, Sequence

from ..models import ContentBlock
from .page_constants import EMPTY_PLACEHOLDER
from .page_standards import FormattingStandards
from .page_types import BlockDimensions, _ProgressTracker


def dimensions_of(
    *, block: ContentBlock, standards: FormattingStandards
) -> BlockDimensions:
    """Return wrapped line count and total height for one block.

    Empty content is measured as a single placeholder character, so an
    empty block still reserves one line.

    Args:
        block: Block to measure.
        standards: Formatting table bound to the page geometry.
    Returns:
        BlockDimensions for the block.

    Example:
        >>> from screenplay.models import BlockType
        >>> dims = dimensions_of(
        ...     block=ContentBlock("b1", BlockType.ACTION, ""),
        ...     standards=FormattingStandards.industry(),
        ... )
        >>> dims.line_count, dims.height
        (1, 36.0)
    """

    rule = standards.rules_for(block.type)
    margins = standards.margins_for(block.type)
    geometry = standards.geometry
    line_count = geometry.estimate_line_count(
        block.content or EMPTY_PLACEHOLDER, margins.width
    )
    line_count = max(line_count, 1)
    height = line_count * geometry.line_height + rule.spacing_before + rule.spacing_after
    return BlockDimensions(
        block=block,
        line_count=line_count,
        height=height,
        spacing_before=rule.spacing_before,
        spacing_after=rule.spacing_after,
        width=margins.width,
        can_break_before=rule.can_break_before,
        must_keep_with_next=rule.must_keep_with_next,
    )


def dimensions_for_blocks(
    *,
    blocks: Sequence[ContentBlock],
    standards: FormattingStandards,
    progress: _ProgressTracker | None = None,
) -> List[BlockDimensions]:
    """Measure every block in order.

    Args:
        blocks: Blocks in reading order.
        standards: Formatting table bound to the page geometry.
        progress: Optional tracker advanced once per block.
    Returns:
        One BlockDimensions per block.
    """

    result: List[BlockDimensions] = []
    for block in blocks:
        result.append(dimensions_of(block=block, standards=standards))
        if progress is not None:
            progress.update(1)
    return result
