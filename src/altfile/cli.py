"""Command line interface for altfile."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import Configuration, EditorSettings, editor_from_environment
from .errors import ConfigurationError, ConversionError
from .files import create_file
from .kinds import TargetKind
from .menu import KindMenu
from .naming import module_name_to_path, path_to_module_name
from .opener import open_file, resolve_editor
from .resolver import PathConventionResolver
from .stubs import StubGenerator

LOGGER = logging.getLogger(__name__)


def _kind_argument(value: str) -> TargetKind:
    try:
        return TargetKind.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Helpful commands for Elixir and Phoenix development")
    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file to use instead of searching the default locations",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    alternate_parser = subparsers.add_parser(
        "alternate", aliases=["alt"], help="go to an alternate file"
    )
    alternate_parser.add_argument("input_path", help="The input file path to convert")
    alternate_parser.add_argument(
        "-t",
        "--target",
        type=_kind_argument,
        default=TargetKind.TEST,
        metavar="KIND",
        help=f"Type of target to visit ({', '.join(kind.value for kind in TargetKind)})",
    )
    alternate_parser.add_argument(
        "--pick", action="store_true", help="Choose the target type from an interactive menu"
    )
    alternate_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show details about the conversion"
    )
    alternate_parser.add_argument(
        "--create", action="store_true", help="Create the target file if it doesn't exist"
    )
    alternate_parser.add_argument(
        "--skip-template", action="store_true", help="Skip template generation when creating files"
    )
    alternate_parser.add_argument(
        "--show-template",
        action="store_true",
        help="Output the template that would be used to create the file",
    )
    alternate_parser.add_argument(
        "--open", action="store_true", help="Open the resulting file in an editor"
    )
    alternate_parser.add_argument(
        "--editor", help="Editor command to use when opening files (overrides config and environment)"
    )
    alternate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the path lacks the directories the target type needs",
    )

    module_parser = subparsers.add_parser("module", help="print the module name for a file path")
    module_parser.add_argument("input_path", help="File path inside lib/ or test/")

    path_parser = subparsers.add_parser("path", help="print the file path for a module name")
    path_parser.add_argument("module_name", help="Dotted module name, e.g. MyAppWeb.UserController")
    path_parser.add_argument("--root", help="Root directory (defaults to the configured lib directory)")
    path_parser.add_argument("--extension", help="File extension (defaults to the source extension)")

    subparsers.add_parser("kinds", help="list the supported target types")

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_config(path: Path | None) -> Configuration:
    if path is not None:
        return Configuration.load(path)
    return Configuration.from_default_locations()


def _pick_kind() -> TargetKind | None:
    if not sys.stdin.isatty():
        raise ConversionError("--pick requires an interactive terminal")
    kinds = list(TargetKind)
    menu = KindMenu([kind.value for kind in kinds], prompt="Select the target type:")
    choice = menu.show(sys.stdin, sys.stdout)
    return None if choice is None else kinds[choice]


def _handle_alternate(args: argparse.Namespace, config: Configuration) -> int:
    kind = args.target
    if args.pick:
        picked = _pick_kind()
        if picked is None:
            print("Selection cancelled", file=sys.stderr)
            return 1
        kind = picked

    resolver = PathConventionResolver(
        formats=config.path_formats,
        extensions=config.file_extensions,
        strict=args.strict,
    )
    result = resolver.convert(args.input_path, kind)

    if args.verbose:
        print(f"Converting {result.original_path} to {result.kind.value} type")
        print(f"Result: {result.path}")
    else:
        print(result.path)

    if args.create or args.show_template:
        template = StubGenerator(config.templates).generate(result.path, result.kind)
        if args.show_template:
            print("\nTemplate:")
            print(template)
        elif args.create:
            outcome = create_file(result.path, "" if args.skip_template else template)
            print(outcome.message)

    if args.open:
        override = EditorSettings(command=args.editor, arguments=[]) if args.editor else None
        settings = resolve_editor(override, editor_from_environment(), config.editor)
        opened = open_file(result.path, settings)
        if not opened.success:
            print(f"Failed to open file: {opened.error}", file=sys.stderr)
        elif args.verbose:
            print(f"Opened file in editor: {result.path}")

    return 0


def _handle_module(args: argparse.Namespace) -> int:
    module_name = path_to_module_name(args.input_path)
    if not module_name:
        print(f"Error: cannot derive a module name from {args.input_path}", file=sys.stderr)
        return 1
    print(module_name)
    return 0


def _handle_path(args: argparse.Namespace, config: Configuration) -> int:
    root = args.root or config.path_formats.lib
    extension = args.extension or config.file_extensions.source
    print(module_name_to_path(args.module_name, root_dir=root, file_extension=extension))
    return 0


def _handle_kinds() -> int:
    for kind in TargetKind:
        print(kind.value)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(getattr(args, "verbose", False))

    try:
        if args.command == "kinds":
            return _handle_kinds()
        if args.command == "module":
            return _handle_module(args)
        config = _load_config(args.config)
        if args.command in ("alternate", "alt"):
            return _handle_alternate(args, config)
        if args.command == "path":
            return _handle_path(args, config)
    except (ConversionError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        LOGGER.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {exc}", file=sys.stderr)
        return 1

    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
