"""CLI entrypoints for xportify commands."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata
from pathlib import Path

from . import console
from .errors import ManifestError, XportifyError
from .logging import configure_logging
from .manifest import render_exports
from .orchestrator import ExtractOutcome, Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _package_version() -> str:
    try:
        return metadata.version("xportify")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xportify",
        description="Generate the package.json exports field from compiled build output.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Compute exports from the source tree and the build output.",
    )
    _add_verbose_option(extract_parser, suppress_default=True)
    extract_parser.add_argument(
        "-p",
        "--project",
        default=".",
        help="Path to the package root containing package.json (defaults to current directory).",
    )
    extract_parser.add_argument(
        "-s",
        "--source",
        default=None,
        help="Source directory relative to the project (defaults to src).",
    )
    extract_parser.add_argument(
        "-d",
        "--dist",
        default=None,
        help="Build output directory relative to the project (defaults to dist).",
    )
    extract_parser.add_argument(
        "-w",
        "--write",
        action="store_true",
        default=None,
        help="Write the generated exports to package.json.",
    )
    extract_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for xportify commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=getattr(args, "log_file", None),
    )

    orchestrator = Orchestrator()

    if args.command == "extract":
        try:
            outcome = orchestrator.run_extract(
                args.project,
                source=args.source,
                dist=args.dist,
                write=args.write,
            )
        except ManifestError as exc:
            console.error(f"Error updating package.json: {exc}")
            parser.exit(1)
        except XportifyError as exc:
            console.error(f"Error: {exc}")
            parser.exit(1, "Run with --verbose for more details.\n")
        _report_extract(parser, outcome)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _report_extract(parser: argparse.ArgumentParser, outcome: ExtractOutcome) -> None:
    check = outcome.check
    console.info("Project path:", _relativize(check.project_path))
    if not check.ok:
        for message in check.errors:
            console.error(f"Error: {message}")
        parser.print_usage(sys.stderr)
        parser.exit(1)
    console.success("validated")
    console.info("Destination path:", _relativize(check.dist_path))

    if not outcome.exports:
        console.error("No entry points found in the build output.")
        return

    console.success("Generated exports object:")
    console.show_json(render_exports(outcome.exports))

    if outcome.written:
        console.success(f"Updated {_relativize(check.package_json_path)} with exports configuration.")
    else:
        console.warning("Run with --write to update package.json.")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
