"""Command-line entry point.

Usage::

    ranchgen new PATH [--app APP] [--module MODULE] [--sup] [--umbrella]
    python -m ranchgen new hello_world --sup
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from ranchgen.config import Config
from ranchgen.scaffolder import GenerationOptions, ProjectGenerator, ScaffoldError
from ranchgen.scaffolder.materializer import next_steps
from ranchgen.utils import console, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ranchgen",
        description="ranchgen -- ranch server project generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  ranchgen new hello_world\n"
            "  ranchgen new hello_world --module HelloWorld --sup\n"
            "  ranchgen new platform --umbrella\n"
        ),
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    new = commands.add_parser(
        "new",
        help="Create a new ranch server project",
        description=(
            "Create a project at PATH.  The application name and module name "
            "are inferred from the path unless --app or --module is given."
        ),
    )
    new.add_argument("path", nargs="?", help="Directory to create the project in")
    new.add_argument("--app", default=None, help="Name the OTP application")
    new.add_argument("--module", default=None, help="Name the modules of the skeleton")
    new.add_argument(
        "--sup",
        action="store_true",
        help="Generate an application callback with a supervision tree",
    )
    new.add_argument(
        "--umbrella",
        action="store_true",
        help="Generate an umbrella project",
    )
    new.add_argument(
        "--elixir-version",
        default=None,
        help="Full Elixir version to require (default: $RANCHGEN_ELIXIR_VERSION or 1.2.6)",
    )
    new.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not list files as they are created",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``ranchgen`` and ``python -m ranchgen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "new":
        parser.print_help()
        sys.exit(1)

    if not args.path:
        print_error('Expected PATH to be given, please use "ranchgen new PATH"')
        sys.exit(1)

    try:
        config = Config.from_env()
        if args.elixir_version:
            config = Config(**{**config.model_dump(), "elixir_version": args.elixir_version})
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc.errors()[0]['msg']}")
        sys.exit(1)
    if args.quiet:
        config.quiet = True

    options = GenerationOptions(supervised=args.sup, umbrella=args.umbrella)
    generator = ProjectGenerator(config, console=console)

    try:
        report = generator.generate(
            args.path, app=args.app, module=args.module, options=options
        )
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    if not report.success:
        print_error(str(report.error))
        sys.exit(1)

    # Quiet runs skip the live progress lines, so list the created paths here.
    if config.quiet:
        console.print(report.summary(), markup=False, highlight=False)
    console.print()
    print_success(f"Created {len(report.created)} paths in {report.root}")
    if not config.quiet:
        print_summary_table(
            {
                "Path": str(report.root),
                "Mode": report.mode.value,
                "Elixir": config.elixir_version,
                "ranch": config.ranch_requirement,
            },
            title="ranchgen new",
        )
    console.print(next_steps(report.mode, args.path), highlight=False)


if __name__ == "__main__":
    main()
