"""Paginate screenplay files and print per-page metrics."""

import argparse
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tqdm import tqdm

from screenplay.models import TitlePageInfo
from screenplay.pagination.pagination import (
    PageGeometry,
    PaginationResult,
    document_stats,
    paginate_blocks,
    paginate_with_title_page,
)
from screenplay.parser import load_screenplay


def _parse_args() -> argparse.Namespace:
    """Return CLI arguments for the pagination report."""

    parser = argparse.ArgumentParser(
        description="Paginate plain-text or JSON screenplays and report page metrics."
    )
    parser.add_argument("files", nargs="+", type=Path, help="Screenplay files to paginate.")
    parser.add_argument(
        "--a4",
        action="store_true",
        help="Use the A4 page layout instead of US letter.",
    )
    parser.add_argument(
        "--title",
        help="Add a title page with this title before the content pages.",
    )
    parser.add_argument(
        "--blocks",
        action="store_true",
        help="List every block height on each page.",
    )
    return parser.parse_args()


def _print_report(*, path: Path, result: PaginationResult, show_blocks: bool) -> None:
    """Print page metrics and issues for one file."""

    print(f"{path}: {result.page_count} page(s)")
    for page in result.pages:
        label = " (title)" if page.is_title_page else ""
        print(
            f" page {page.page_number}{label}: blocks={len(page.blocks)} "
            f"used={page.used_height:.2f}pt remaining={page.remaining_height:.2f}pt"
        )
        if show_blocks and page.block_heights:
            for record in page.block_heights:
                print(f"  {record.block_id} {record.type.value} h={record.height:.2f}")
    for issue in result.warnings:
        print(f" warning: {issue}")
    for issue in result.report.issues:
        print(f" issue: {issue}")


def main() -> None:
    args = _parse_args()
    geometry = PageGeometry.a4() if args.a4 else PageGeometry()
    for path in args.files:
        blocks = load_screenplay(path)
        progress = tqdm(total=len(blocks), desc=path.name, unit="block") if blocks else None
        try:
            if args.title:
                result = paginate_with_title_page(
                    blocks,
                    TitlePageInfo(title=args.title),
                    geometry=geometry,
                    debug=args.blocks,
                    progress=progress,
                )
            else:
                result = paginate_blocks(
                    blocks, geometry=geometry, debug=args.blocks, progress=progress
                )
        finally:
            if progress is not None:
                progress.close()
        _print_report(path=path, result=result, show_blocks=args.blocks)
        stats = document_stats(blocks, result.pages)
        print(f" words={stats.word_count} characters={stats.character_count}")


if __name__ == "__main__":
    main()
