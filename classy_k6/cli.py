"""CLI entrypoint for the classy-k6 converter."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .codegen import Codegen, run_codegen
from .config import CodegenConfig, ConfigError, load_config
from .errors import CodegenError, MissingTarget
from .logging import configure_logging, get_logger

_FAILURE_MARKER = "❌"
_SUCCESS_MARKER = "✅"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classy-k6",
        description="CLI that converts Classy files to k6 tests",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File path to the Classy file.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .classy-k6.yml or its directory (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated scripts instead of writing them.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for classy-k6."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        config = load_config(args.config or Path.cwd())
        if args.dry_run:
            _print_dry_run(args.path, config)
            return
        written = run_codegen(args.path, config=config)
    except (CodegenError, ConfigError) as exc:
        parser.exit(1, f"{_FAILURE_MARKER} {exc}\n")
    except OSError as exc:
        logger.debug("I/O failure", exc_info=True)
        parser.exit(1, f"{_FAILURE_MARKER} {exc}\nRun with --verbose for more details.\n")

    for path in written:
        print(f"{_SUCCESS_MARKER} Generated: {_relativize(path)}")


def _print_dry_run(target: str | None, config: CodegenConfig) -> None:
    if not target:
        raise MissingTarget()
    codegen = Codegen(config)
    for document in codegen.generate((Path.cwd() / target).resolve()):
        print(f"// {codegen.writer.filename_for(document)} (dry-run)")
        print(document.text, end="")


def _relativize(path: Path) -> str:
    try:
        return f"./{path.relative_to(Path.cwd())}"
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
