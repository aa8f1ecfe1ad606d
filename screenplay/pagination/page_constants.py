"""Shared constants for page geometry and pagination."""

from __future__ import annotations

import os

MM_PER_PT = 0.352778
PT_PER_MM = 1 / MM_PER_PT
TWIPS_PER_PT = 20
MM_PER_INCH = 25.4
DEFAULT_DPI = 96
MIN_TEXT_WIDTH_PT = 72.0
EMPTY_PLACEHOLDER = " "
EPSILON = 1e-6
DEBUG_PAGINATION = os.getenv("DEBUG_PAGINATION", "0") not in {
    "",
    "0",
    "false",
    "False",
}
