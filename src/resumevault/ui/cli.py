from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from resumevault.app import import_resume_files, open_registry
from resumevault.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from resumevault.domain.collections import StoreRegistry

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import and curate resume data")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy database URI (defaults to DATABASE_URI or the data directory)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_cmd = subparsers.add_parser("import", help="Extract and merge resume files")
    import_cmd.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Resume documents (PDF or plain text)",
    )

    tags = subparsers.add_parser("tags", help="Tag commands")
    tags_sub = tags.add_subparsers(dest="tags_command", required=True)
    tags_search = tags_sub.add_parser("search", help="List tag names containing a query")
    tags_search.add_argument("query", type=str, nargs="?", default="")
    tags_add = tags_sub.add_parser("add", help="Create a tag unless it already exists")
    tags_add.add_argument("name", type=str)

    subparsers.add_parser("summary", help="Show how many records each collection holds")

    jobs = subparsers.add_parser("jobs", help="Job commands")
    jobs_sub = jobs.add_subparsers(dest="jobs_command", required=True)
    jobs_list = jobs_sub.add_parser("list", help="List stored jobs")
    jobs_list.add_argument(
        "--with-descriptions",
        action="store_true",
        help="Also print each job's description lines",
    )
    jobs_delete = jobs_sub.add_parser("delete", help="Delete a job and its descriptions")
    jobs_delete.add_argument("job_id", type=str)

    return parser.parse_args(list(argv))


def _validate_args(args: argparse.Namespace) -> None:
    if args.command == "import":
        missing = [str(path) for path in args.files if not path.is_file()]
        if missing:
            raise ValueError(f"No such file(s): {', '.join(missing)}")
    if args.command == "tags" and args.tags_command == "add" and not args.name.strip():
        raise ValueError("Tag name must not be blank")


def _print_summary(registry: StoreRegistry) -> None:
    for kind, count in registry.counts().items():
        print(f"{kind.value}: {count}")


def _print_jobs(registry: StoreRegistry, *, with_descriptions: bool) -> None:
    for job in registry.jobs:
        start = job.start_date.date().isoformat() if job.start_date else "?"
        end = job.end_date.date().isoformat() if job.end_date else "?"
        print(f"{job.id}  {job.company_name} | {job.job_title} ({start} - {end})")
        if with_descriptions:
            for line in registry.jobs.descriptions_for(job.id):
                print(f"    - {line.description}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
    try:
        _validate_args(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "import":
            registry = open_registry(database_uri=parsed_args.database_uri)
            report = import_resume_files(parsed_args.files, registry=registry)
            log.info(
                "Import finished: succeeded=%s, failed=%s",
                len(report.succeeded),
                len(report.failed),
            )
            if not report.all_succeeded:
                sys.exit(1)
            return

        registry = open_registry(database_uri=parsed_args.database_uri)
        if parsed_args.command == "tags" and parsed_args.tags_command == "search":
            for name in registry.tags.search(parsed_args.query):
                print(name)
        elif parsed_args.command == "tags" and parsed_args.tags_command == "add":
            tag_id = registry.tags.resolve_or_create(parsed_args.name.strip())
            log.info("Tag %s has id %s", parsed_args.name.strip(), tag_id)
        elif parsed_args.command == "summary":
            _print_summary(registry)
        elif parsed_args.command == "jobs" and parsed_args.jobs_command == "list":
            _print_jobs(registry, with_descriptions=parsed_args.with_descriptions)
        elif parsed_args.command == "jobs" and parsed_args.jobs_command == "delete":
            if registry.jobs.get(parsed_args.job_id) is None:
                raise LookupError(f"No job with id {parsed_args.job_id}")  # noqa: TRY301
            registry.jobs.delete_item(parsed_args.job_id)
            log.info("Deleted job %s", parsed_args.job_id)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
