"""
Parsing helpers that convert plain text and JSON into screenplay blocks.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import List

from .cleaning import normalize_whitespace
from .models import BlockType, ContentBlock


_SCENE_PREFIXES = ("INT.", "EXT.", "INTERIOR", "EXTERIOR")
_TRANSITION_WORDS = ("CUT TO", "FADE IN", "FADE OUT", "DISSOLVE TO", "SMASH CUT")
_CHARACTER_MAX_LENGTH = 40
_CHARACTER_MAX_WORDS = 3
_PARENTHETICAL_RE = re.compile(r"^\(.*\)$")


def detect_block_type(line: str, current: BlockType) -> BlockType:
    """Guess the element type of ``line``, falling back to ``current``.

    Example:
        >>> detect_block_type("int. kitchen - night", BlockType.ACTION).value
        'scene_heading'
        >>> detect_block_type("MARY", BlockType.ACTION).value
        'character'
        >>> detect_block_type("MARY", BlockType.DIALOGUE).value
        'dialogue'
    """

    trimmed = line.strip()
    upper = trimmed.upper()
    if upper.startswith(_SCENE_PREFIXES) or (
        " - " in upper and ("INT." in upper or "EXT." in upper)
    ):
        return BlockType.SCENE_HEADING
    if upper.endswith(":") and any(word in upper for word in _TRANSITION_WORDS):
        return BlockType.TRANSITION
    if _PARENTHETICAL_RE.match(trimmed):
        return BlockType.PARENTHETICAL
    if (
        trimmed
        and trimmed == upper
        and len(trimmed) < _CHARACTER_MAX_LENGTH
        and len(trimmed.split()) <= _CHARACTER_MAX_WORDS
        and current != BlockType.DIALOGUE
        and "." not in trimmed
    ):
        return BlockType.CHARACTER
    return current


def parse_text(text: str) -> List[ContentBlock]:
    """Split a plain-text screenplay into blocks, one per non-blank line.

    Lines directly after a character cue or parenthetical read as dialogue
    unless they are detected as another element. A blank line ends the
    speech, so the next line defaults to action.

    Example:
        >>> [b.type.value for b in parse_text("EXT. PIER - DAY\\n\\nJOE\\n(quietly)\\nHi.")]
        ['scene_heading', 'character', 'parenthetical', 'dialogue']
    """

    blocks: List[ContentBlock] = []
    previous: BlockType | None = None
    for raw in text.splitlines():
        line = normalize_whitespace(raw)
        if not line:
            previous = None
            continue
        if previous in (BlockType.CHARACTER, BlockType.PARENTHETICAL):
            current = BlockType.DIALOGUE
        else:
            current = BlockType.ACTION
        block_type = detect_block_type(line, current)
        blocks.append(ContentBlock(id=f"b{len(blocks) + 1}", type=block_type, content=line))
        previous = block_type
    return blocks


def load_blocks(path: Path) -> List[ContentBlock]:
    """Read blocks from a JSON list of ``{"id", "type", "content"}`` objects.

    Unknown block types raise ``ValueError``.
    """

    data = json.loads(path.read_text(encoding="utf-8"))
    return [ContentBlock.from_dict(item) for item in data]


def load_screenplay(path: Path) -> List[ContentBlock]:
    """Read blocks from ``.json`` or plain-text screenplay files."""

    if path.suffix.lower() == ".json":
        return load_blocks(path)
    return parse_text(path.read_text(encoding="utf-8"))
