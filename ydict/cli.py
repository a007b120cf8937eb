"""Command line interface for Youdao dictionary lookups"""

import argparse
import json
import sys
from pathlib import Path

from .config.settings import settings
from .core.factory import create_dict_engine, create_suggest_engine
from .logging_config import get_logger, setup_logging
from .models.task import TranslationTask

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Look up words on dict.youdao.com",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ydict dict hello                  # English headword, Chinese explanation
  ydict dict 你好 --src zh --tgt en  # Chinese headword, English explanation
  ydict suggest hel --limit 3       # Near-match suggestions
  ydict dict hello --annotations    # Dump text and style ranges as JSON
        """,
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    dict_cmd = commands.add_parser("dict", help="Dictionary lookup")
    dict_cmd.add_argument("text", help="Word or phrase to look up")
    dict_cmd.add_argument("--src", default="en", help="Source language (default: en)")
    dict_cmd.add_argument("--tgt", default="zh", help="Target language (default: zh)")

    suggest_cmd = commands.add_parser("suggest", help="Word suggestions")
    suggest_cmd.add_argument("text", help="Query string")
    suggest_cmd.add_argument(
        "-n",
        "--limit",
        type=int,
        default=settings.youdao.suggest_limit,
        help=f"Maximum suggestions (default: {settings.youdao.suggest_limit})",
    )

    # Output and logging options apply to both commands
    for sub in (dict_cmd, suggest_cmd):
        sub.add_argument(
            "--annotations",
            action="store_true",
            help="Print text and annotations as JSON",
        )
        log_group = sub.add_argument_group("logging options")
        log_group.add_argument(
            "-v", "--verbose", action="store_true", help="Enable verbose logging"
        )
        log_group.add_argument(
            "--debug", action="store_true", help="Enable debug logging"
        )
        log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    return parser


def run_command(args: argparse.Namespace) -> TranslationTask:
    """Run the selected pipeline and return the finished task"""
    if args.command == "dict":
        task = TranslationTask(text=args.text, src=args.src, tgt=args.tgt)
        return create_dict_engine().run(task)
    task = TranslationTask(text=args.text, limit=args.limit)
    return create_suggest_engine().run(task)


def print_task(task: TranslationTask, annotations: bool = False) -> None:
    """Print a finished task's result"""
    if task.result is None:
        return
    if annotations:
        print(json.dumps(task.result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(task.result.plain)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    log_level = (
        "DEBUG" if args.debug or args.verbose or settings.debug else settings.logging.level
    )
    log_file = args.log_file or settings.logging.file
    setup_logging(log_level, str(log_file) if log_file else None)

    try:
        task = run_command(args)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)

    if task.failed:
        print(task.error, file=sys.stderr)
        sys.exit(1)

    print_task(task, args.annotations)


if __name__ == "__main__":
    main()
