"""CLI for printing the Zettelkasten network around one note as JSON"""

import argparse
import json
import sys

from loguru import logger

from zettelbranch.config import settings
from zettelbranch.hierarchy import ZettelNetworkBuilder, parse_zettel_id
from zettelbranch.note_store import LocalNoteStore


def main(notes_dir: str, note: str, depth: int, max_branches: int) -> int:
    zettel_id = parse_zettel_id(note)
    if zettel_id is None:
        logger.error(f"No zettel identifier in note name: {note}")
        return 1

    note_store = LocalNoteStore(notes_dir)
    network = ZettelNetworkBuilder().build(
        note_store.get_universe(), zettel_id, max_depth=depth, max_branches=max_branches
    )
    if network is None:
        logger.error(f"No note with zettel id {zettel_id} in {notes_dir}")
        return 1

    print(json.dumps(network.model_dump(mode="json", by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--notes-dir",
        type=str,
        required=False,
        help="Folder containing markdown notes",
        default=str(settings.notes_dir),
    )
    parser.add_argument(
        "--note", type=str, required=True, help="Zettel id or display name of the focal note"
    )
    parser.add_argument(
        "--depth",
        type=int,
        choices=[1, 2, 3],
        required=False,
        help="Number of ancestor tiers to show",
        default=settings.show_depth,
    )
    parser.add_argument(
        "--max-branches",
        type=int,
        required=False,
        help="Maximum notes per tier",
        default=settings.max_branches,
    )

    args = parser.parse_args()
    if args.max_branches < 1:
        parser.error("--max-branches must be at least 1")

    sys.exit(
        main(
            notes_dir=args.notes_dir,
            note=args.note,
            depth=args.depth,
            max_branches=args.max_branches,
        )
    )
