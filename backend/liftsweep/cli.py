"""
Command line interface.

    liftsweep print data/training.txt
    liftsweep classify data/training.txt data/unknown.txt --votes
    liftsweep import data/training.txt
    liftsweep serve --port 8000
"""

import argparse
import logging
import sys
from typing import List, Optional

from liftsweep.config import get_settings
from liftsweep.knn import (
    ActionClassifier, BinIndexError, ReferenceLibrary, format_action, print_dataset, read_records
)

logger = logging.getLogger(__name__)


def _load_library(path: str) -> ReferenceLibrary:
    return ReferenceLibrary.from_file(
        path, require_complete_bins=get_settings().require_complete_bins
    )


def cmd_print(args) -> int:
    print_dataset(_load_library(args.dataset))
    return 0


def cmd_classify(args) -> int:
    classifier = ActionClassifier(_load_library(args.dataset))

    for lineno, (action, _) in enumerate(read_records(args.records), 1):
        if len(action) == 0:
            logger.debug(f"Line {lineno}: no samples, skipped")
            continue
        result = classifier.evaluate(action)
        line = format_action(action, result.label)
        if args.votes:
            votes = " ".join(f"{label}={count}" for label, count in result.votes.items())
            line = f"{line} [{votes}]"
        print(line)
    return 0


def cmd_import(args) -> int:
    from liftsweep.database import SyncSessionLocal, create_tables_sync
    from liftsweep.models.recording import ReferenceRecording, RecordingSource

    library = _load_library(args.dataset)
    create_tables_sync()

    session = SyncSessionLocal()
    try:
        for label, action in library.items():
            session.add(ReferenceRecording.from_action(
                action, label, source=RecordingSource.IMPORT, note=args.note
            ))
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    print(f"Imported {len(library.lifts)} lifts and {len(library.sweeps)} sweeps from {args.dataset}")
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("liftsweep.main:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="liftsweep",
        description="Classify motion recordings as lift or sweep",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("print", help="Print a dataset: lifts first, then sweeps")
    p.add_argument("dataset", help="Path to the labeled dataset")
    p.set_defaults(func=cmd_print)

    p = subparsers.add_parser("classify", help="Classify every record of a file")
    p.add_argument("dataset", help="Path to the labeled dataset")
    p.add_argument("records", help="Path to the records to classify (labels are ignored)")
    p.add_argument("--votes", action="store_true", help="Append the vote tally to each line")
    p.set_defaults(func=cmd_classify)

    p = subparsers.add_parser("import", help="Store a dataset's lift/sweep records in the database")
    p.add_argument("dataset", help="Path to the labeled dataset")
    p.add_argument("--note", default=None, help="Note attached to every imported recording")
    p.set_defaults(func=cmd_import)

    p = subparsers.add_parser("serve", help="Run the HTTP API")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or get_settings().debug) else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        return args.func(args)
    except (FileNotFoundError, BinIndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
