"""Block dimension calculation."""

import pytest

from screenplay.models import BlockType, ContentBlock
from screenplay.pagination.page_dimensions import dimensions_for_blocks, dimensions_of


@pytest.mark.parametrize("block_type", list(BlockType))
def test_empty_block_takes_one_line(standards, block_type):
    dims = dimensions_of(block=ContentBlock("e", block_type, ""), standards=standards)
    rule = standards.rules_for(block_type)

    assert dims.line_count == 1
    assert dims.height == pytest.approx(
        standards.geometry.line_height + rule.spacing_before + rule.spacing_after
    )
    assert dims.height > 0


def test_height_formula(standards):
    text = " ".join(["word"] * 30)
    dims = dimensions_of(block=ContentBlock("a", BlockType.ACTION, text), standards=standards)

    # action lines hold 12 four-letter words
    assert dims.line_count == 3
    assert dims.height == pytest.approx(3 * 12 + 12 + 12)
    assert dims.spacing_before == 12
    assert dims.spacing_after == 12


def test_narrow_elements_wrap_more(standards):
    text = " ".join(["word"] * 30)
    action = dimensions_of(block=ContentBlock("a", BlockType.ACTION, text), standards=standards)
    dialogue = dimensions_of(block=ContentBlock("d", BlockType.DIALOGUE, text), standards=standards)

    assert dialogue.line_count > action.line_count
    assert dialogue.width < action.width


def test_flags_copied_from_rule(standards):
    cue = dimensions_of(block=ContentBlock("c", BlockType.CHARACTER, "ANNA"), standards=standards)
    line = dimensions_of(block=ContentBlock("d", BlockType.DIALOGUE, "Hi."), standards=standards)

    assert cue.must_keep_with_next and cue.can_break_before
    assert not line.must_keep_with_next and not line.can_break_before
    assert cue.block_id == "c"
    assert cue.type == BlockType.CHARACTER


def test_measurement_is_pure(standards):
    block = ContentBlock("a", BlockType.ACTION, "A door slams somewhere upstairs.")

    assert dimensions_of(block=block, standards=standards) == dimensions_of(
        block=block, standards=standards
    )


def test_dimensions_for_blocks_reports_progress(standards):
    class Counter:
        def __init__(self):
            self.n = 0

        def update(self, n=1):
            self.n += n

    blocks = [ContentBlock(str(i), BlockType.ACTION, "x") for i in range(5)]
    counter = Counter()
    dims = dimensions_for_blocks(blocks=blocks, standards=standards, progress=counter)

    assert [d.block for d in dims] == blocks
    assert counter.n == 5
