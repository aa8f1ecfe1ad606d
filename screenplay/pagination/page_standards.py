"""Per-element formatting rules for industry-standard screenplay pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping

from ..models import BlockType
from .page_constants import MIN_TEXT_WIDTH_PT
from .page_settings import PageGeometry
from .page_support import _warn_issues
from .page_types import Issue, IssueKind


@dataclass(slots=True, frozen=True)
class FormattingRule:
    """Static layout rule for one block type.

    Args:
        left_offset: Inset from the left edge of the content box, in character columns.
        right_offset: Inset from the right edge of the content box, in character columns.
        spacing_before: Whitespace above the block, in points.
        spacing_after: Whitespace below the block, in points.
        uppercase: Render text in capitals.
        bold: Render text bold.
        alignment: "left", "center" or "right".
        can_break_before: Whether a page may start at this block.
        must_keep_with_next: Whether this block is glued to the block after it.
        orphan_lines: Minimum lines to keep with following content.
    """

    left_offset: float
    right_offset: float
    spacing_before: float
    spacing_after: float
    uppercase: bool = False
    bold: bool = False
    alignment: str = "left"
    can_break_before: bool = True
    must_keep_with_next: bool = False
    orphan_lines: int = 1


@dataclass(slots=True, frozen=True)
class Margins:
    """Horizontal placement of a block inside the content box, in points."""

    left: float
    right: float
    width: float


INDUSTRY_RULES: Dict[BlockType, FormattingRule] = {
    BlockType.SCENE_HEADING: FormattingRule(
        left_offset=0,
        right_offset=0,
        spacing_before=24,
        spacing_after=12,
        uppercase=True,
        orphan_lines=2,
    ),
    BlockType.ACTION: FormattingRule(
        left_offset=0,
        right_offset=0,
        spacing_before=12,
        spacing_after=12,
    ),
    BlockType.CHARACTER: FormattingRule(
        left_offset=22,
        right_offset=0,
        spacing_before=12,
        spacing_after=0,
        uppercase=True,
        must_keep_with_next=True,
    ),
    BlockType.DIALOGUE: FormattingRule(
        left_offset=10,
        right_offset=15,
        spacing_before=0,
        spacing_after=12,
        can_break_before=False,
        orphan_lines=2,
    ),
    BlockType.PARENTHETICAL: FormattingRule(
        left_offset=16,
        right_offset=20,
        spacing_before=0,
        spacing_after=0,
        can_break_before=False,
        must_keep_with_next=True,
    ),
    BlockType.TRANSITION: FormattingRule(
        left_offset=45,
        right_offset=0,
        spacing_before=12,
        spacing_after=24,
        uppercase=True,
        alignment="right",
    ),
}


@dataclass(slots=True, frozen=True)
class FormattingStandards:
    """Formatting table bound to a page geometry.

    Margins for every type are resolved once at construction. A rule that
    leaves no room for text is clamped to ``MIN_TEXT_WIDTH_PT`` and recorded
    in ``configuration_issues``. The table and its geometry are read-only
    once built, so the cached margins always match ``geometry``.

    Example:
        >>> standards = FormattingStandards.industry()
        >>> standards.rules_for(BlockType.CHARACTER).must_keep_with_next
        True
        >>> standards.configuration_issues
        []
    """

    geometry: PageGeometry = field(default_factory=PageGeometry)
    rules: Mapping[BlockType, FormattingRule] = field(
        default_factory=lambda: dict(INDUSTRY_RULES)
    )
    configuration_issues: List[Issue] = field(default_factory=list, init=False)
    _margins: Dict[BlockType, Margins] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        missing = [block_type.value for block_type in BlockType if block_type not in self.rules]
        if missing:
            raise ValueError(f"No formatting rule for: {', '.join(missing)}")
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))
        for block_type in BlockType:
            self._margins[block_type] = self._resolve_margins(block_type=block_type)
        _warn_issues(issues=self.configuration_issues)

    @classmethod
    def industry(cls, geometry: PageGeometry | None = None) -> "FormattingStandards":
        """Return the industry-standard table for ``geometry``."""

        return cls(geometry=geometry or PageGeometry())

    def rules_for(self, block_type: BlockType) -> FormattingRule:
        """Return the formatting rule for ``block_type``."""

        return self.rules[block_type]

    def margins_for(self, block_type: BlockType) -> Margins:
        """Return left/right insets and usable text width for ``block_type``.

        Returns:
            Margins in points.
        """

        return self._margins[block_type]

    def _resolve_margins(self, *, block_type: BlockType) -> Margins:
        rule = self.rules[block_type]
        column = self.geometry.char_offset_pt
        left = rule.left_offset * column
        right = rule.right_offset * column
        width = self.geometry.content_width_pt - left - right
        if width <= 0:
            self.configuration_issues.append(
                Issue(
                    kind=IssueKind.CONFIGURATION,
                    page_number=None,
                    message=(
                        f"{block_type.value}: text width {width:.1f}pt is not positive; "
                        f"clamped to {MIN_TEXT_WIDTH_PT:.1f}pt"
                    ),
                    excess=-width,
                )
            )
            width = MIN_TEXT_WIDTH_PT
        return Margins(left=left, right=right, width=width)
