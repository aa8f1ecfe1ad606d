"""Public pagination helpers for screenplay pages."""

from __future__ import annotations

from .page_dimensions import dimensions_for_blocks, dimensions_of
from .page_flow import (
    document_stats,
    has_title_page,
    paginate_blocks,
    paginate_with_title_page,
    total_page_count,
)
from .page_grouping import group_from, group_height, iter_groups
from .page_packer import PagePacker, pack_pages
from .page_settings import PageGeometry
from .page_standards import FormattingRule, FormattingStandards, Margins
from .page_types import (
    BlockDimensions,
    DocumentStats,
    Issue,
    IssueKind,
    KeepTogetherGroup,
    Page,
    PaginationResult,
    ValidationReport,
)
from .page_validation import validate_pages, validate_title_info, validate_title_pages

__all__ = [
    "BlockDimensions",
    "DocumentStats",
    "FormattingRule",
    "FormattingStandards",
    "Issue",
    "IssueKind",
    "KeepTogetherGroup",
    "Margins",
    "Page",
    "PageGeometry",
    "PagePacker",
    "PaginationResult",
    "ValidationReport",
    "dimensions_for_blocks",
    "dimensions_of",
    "document_stats",
    "group_from",
    "group_height",
    "has_title_page",
    "iter_groups",
    "pack_pages",
    "paginate_blocks",
    "paginate_with_title_page",
    "total_page_count",
    "validate_pages",
    "validate_title_info",
    "validate_title_pages",
]
