"""End-to-end pagination pipeline and its invariants."""

from screenplay.models import BlockType as T
from screenplay.models import ContentBlock, TitlePageInfo
from screenplay.pagination.page_dimensions import dimensions_for_blocks
from screenplay.pagination.page_settings import PageGeometry
from screenplay.pagination.page_standards import FormattingStandards
from screenplay.pagination.page_types import IssueKind, flatten_blocks
from screenplay.pagination.pagination import (
    document_stats,
    has_title_page,
    paginate_blocks,
    paginate_with_title_page,
    total_page_count,
)

from conftest import generate_script


def _signature(result):
    return [
        (p.page_number, [b.id for b in p.blocks], p.used_height, p.remaining_height)
        for p in result.pages
    ]


# invariants over generated scripts


def test_coverage_and_order(script_blocks):
    result = paginate_blocks(script_blocks)

    assert flatten_blocks(result.pages) == script_blocks


def test_no_empty_pages(script_blocks):
    result = paginate_blocks(script_blocks)

    assert result.pages
    assert all(page.blocks for page in result.pages)
    assert not result.report.of_kind(IssueKind.EMPTY_PAGE)


def test_capacity_and_numbering(script_blocks):
    result = paginate_blocks(script_blocks)
    capacity = PageGeometry().content_height_pt

    assert result.warnings == []
    for idx, page in enumerate(result.pages):
        assert page.page_number == idx + 1
        assert page.used_height <= capacity + 1e-6
        assert page.remaining_height == capacity - page.used_height
    assert not result.report.of_kind(IssueKind.OVERFLOW)
    assert not result.report.of_kind(IssueKind.NEGATIVE_REMAINING)


def test_determinism(script_blocks):
    assert _signature(paginate_blocks(script_blocks)) == _signature(
        paginate_blocks(script_blocks)
    )


def test_keep_together_and_monotonic(script_blocks, standards):
    result = paginate_blocks(script_blocks, standards=standards)
    capacity = standards.geometry.content_height_pt
    page_of = {b.id: p.page_number for p in result.pages for b in p.blocks}
    dims = dimensions_for_blocks(blocks=script_blocks, standards=standards)

    for a, b in zip(dims, dims[1:]):
        assert page_of[a.block_id] <= page_of[b.block_id]
        if a.must_keep_with_next and a.height + b.height <= capacity:
            assert page_of[a.block_id] == page_of[b.block_id]


def test_no_character_orphans_in_generated_scripts(script_blocks):
    result = paginate_blocks(script_blocks)

    assert not result.report.of_kind(IssueKind.ORPHANED_CHARACTER)


def test_many_pages_for_long_scripts():
    blocks = generate_script(5, length=600)
    result = paginate_blocks(blocks)

    assert result.page_count > 5
    assert flatten_blocks(result.pages) == blocks


# concrete scenarios


def test_single_scene_heading_page():
    block = ContentBlock("h1", T.SCENE_HEADING, "EXT. HARBOUR - DAWN")
    result = paginate_blocks([block])

    assert result.page_count == 1
    assert result.pages[0].blocks == [block]


def test_oversized_action_is_placed_and_reported(capsys):
    block = ContentBlock("big", T.ACTION, " ".join(["word"] * 2400))
    result = paginate_blocks([block])

    assert result.page_count == 1
    assert result.pages[0].blocks == [block]
    assert [w.kind for w in result.warnings] == [IssueKind.OVERSIZED_GROUP]
    assert result.report.of_kind(IssueKind.NEGATIVE_REMAINING)
    assert not result.report.is_valid
    assert "warning:" in capsys.readouterr().err


def test_empty_blocks_reserve_a_line():
    blocks = [ContentBlock(str(i), t, "") for i, t in enumerate(T)]
    result = paginate_blocks(blocks, debug=True)

    heights = [h.height for p in result.pages for h in p.block_heights]
    assert len(heights) == len(blocks)
    assert all(h >= 12 for h in heights)


def test_a4_geometry_changes_capacity():
    blocks = generate_script(11, length=300)
    letter = paginate_blocks(blocks)
    a4 = paginate_blocks(blocks, geometry=PageGeometry.a4())

    assert flatten_blocks(a4.pages) == blocks
    assert a4.page_count != letter.page_count


def test_configuration_issues_surface_as_warnings(capsys):
    standards = FormattingStandards.industry(PageGeometry(page_width_mm=80.0))
    capsys.readouterr()
    result = paginate_blocks([ContentBlock("c", T.CHARACTER, "ANNA")], standards=standards)

    assert result.warnings == standards.configuration_issues
    assert capsys.readouterr().err == ""


def test_progress_tracker_advanced():
    class Tracker:
        total = 0

        def update(self, n=1):
            self.total += n

    tracker = Tracker()
    blocks = generate_script(3, length=20)
    paginate_blocks(blocks, progress=tracker)

    assert tracker.total == len(blocks)


# title page


def test_title_page_precedes_content():
    blocks = generate_script(9, length=200)
    info = TitlePageInfo(title="Night Shift", author="A. Writer")
    plain = paginate_blocks(blocks)
    result = paginate_with_title_page(blocks, info)

    title, *content = result.pages
    assert title.is_title_page
    assert title.page_number == 1
    assert title.blocks == []
    assert title.remaining_height == 0
    assert [p.page_number for p in content] == list(range(2, len(content) + 2))
    assert [p.blocks for p in content] == [p.blocks for p in plain.pages]
    assert result.warnings == []
    assert not result.report.of_kind(IssueKind.TITLE_PAGE)
    assert not result.report.of_kind(IssueKind.PAGE_NUMBERING)


def test_title_page_with_bad_info_still_paginates():
    blocks = [ContentBlock("a", T.ACTION, "Snow falls.")]
    result = paginate_with_title_page(blocks, TitlePageInfo(title="X" * 150))

    assert result.page_count == 2
    assert [w.kind for w in result.warnings] == [IssueKind.TITLE_PAGE]


def test_total_page_count():
    blocks = generate_script(4, length=150)
    pages = paginate_blocks(blocks).page_count

    assert total_page_count(blocks) == pages
    assert total_page_count(blocks, TitlePageInfo(title="Night Shift")) == pages + 1
    assert total_page_count(blocks, TitlePageInfo(title="  ")) == pages
    assert not has_title_page(None)


def test_document_stats():
    blocks = [
        ContentBlock("a", T.ACTION, "The lights flicker."),
        ContentBlock("c", T.CHARACTER, "ANNA"),
        ContentBlock("d", T.DIALOGUE, ""),
    ]
    result = paginate_blocks(blocks)
    stats = document_stats(blocks, result.pages)

    assert stats.page_count == 1
    assert stats.word_count == 4
    assert stats.character_count == len("The lights flicker.") + len("ANNA")
