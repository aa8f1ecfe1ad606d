"""
Shared fixtures for pagination tests.
"""

import random
from typing import Callable, List

import pytest

from screenplay.models import BlockType, ContentBlock
from screenplay.pagination.page_standards import INDUSTRY_RULES, FormattingStandards
from screenplay.pagination.page_types import BlockDimensions


@pytest.fixture
def standards() -> FormattingStandards:
    """Industry-standard table on the default letter geometry."""
    return FormattingStandards.industry()


@pytest.fixture
def make_dims() -> Callable[..., BlockDimensions]:
    """Factory for synthetic measurements with a chosen height."""

    counter = iter(range(1, 10_000))

    def factory(block_type: BlockType, height: float, content: str = "") -> BlockDimensions:
        rule = INDUSTRY_RULES[block_type]
        block = ContentBlock(id=f"d{next(counter)}", type=block_type, content=content)
        return BlockDimensions(
            block=block,
            line_count=1,
            height=height,
            spacing_before=rule.spacing_before,
            spacing_after=rule.spacing_after,
            width=100.0,
            can_break_before=rule.can_break_before,
            must_keep_with_next=rule.must_keep_with_next,
        )

    return factory


_WORDS = "the door creaks open and a cold wind sweeps across the empty hall".split()


def _sentence(rng: random.Random, words: int) -> str:
    return " ".join(rng.choice(_WORDS) for _ in range(words))


def generate_script(seed: int, length: int = 120) -> List[ContentBlock]:
    """Return a plausible block sequence built from a seeded RNG."""

    rng = random.Random(seed)
    blocks: List[ContentBlock] = []

    def add(block_type: BlockType, content: str) -> None:
        blocks.append(ContentBlock(id=f"s{seed}-{len(blocks)}", type=block_type, content=content))

    while len(blocks) < length:
        roll = rng.random()
        if roll < 0.1:
            add(BlockType.SCENE_HEADING, "INT. HALL - NIGHT")
        elif roll < 0.35:
            add(BlockType.ACTION, _sentence(rng, rng.randint(0, 60)))
        elif roll < 0.9:
            add(BlockType.CHARACTER, rng.choice(["ANNA", "BEN", "DR. CHO"]))
            if rng.random() < 0.3:
                add(BlockType.PARENTHETICAL, "(beat)")
            add(BlockType.DIALOGUE, _sentence(rng, rng.randint(1, 40)))
        else:
            add(BlockType.TRANSITION, "CUT TO:")
    return blocks


@pytest.fixture(params=[1, 2, 3, 7, 42])
def script_blocks(request) -> List[ContentBlock]:
    """Generated screenplays of mixed element types."""
    return generate_script(request.param)
