"""
Typed containers for screenplay content.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class BlockType(str, Enum):
    """Element types a screenplay block can take."""

    SCENE_HEADING = "scene_heading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"


@dataclass(slots=True, frozen=True)
class ContentBlock:
    """One typed unit of screenplay text.

    Attributes:
        id: Opaque identifier, stable for the lifetime of the block.
        type: Element type of the block.
        content: Raw text; may be empty.

    Example:
        >>> ContentBlock("b1", BlockType.ACTION, "Rain.").type.value
        'action'
    """

    id: str
    type: BlockType
    content: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "ContentBlock":
        """Build a block from a plain mapping such as decoded JSON.

        Unknown ``type`` strings raise ``ValueError``.

        Example:
            >>> ContentBlock.from_dict({"id": "x", "type": "dialogue"}).content
            ''
        """

        return cls(
            id=str(data["id"]),
            type=BlockType(data["type"]),
            content=str(data.get("content") or ""),
        )


@dataclass(slots=True, frozen=True)
class TitlePageInfo:
    """Cover page details for a screenplay."""

    title: str
    author: str | None = None
    description: str | None = None
    contact: str | None = None
    date: str | None = None
