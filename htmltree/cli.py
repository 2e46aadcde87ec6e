"""Command-line interface for htmltree."""

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .build import build_site, load_page, render_page, render_page_file
from .tags import TAGS

# Malformed YAML/JSON and schema failures are reported the same way.
INPUT_ERRORS = (json.JSONDecodeError, yaml.YAMLError, ValidationError)


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    try:
        if args.output == "-":
            sys.stdout.write(render_page(load_page(input_path)))
            return
        written = render_page_file(input_path, Path(args.output))
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except INPUT_ERRORS as exc:
        raise SystemExit(f"Invalid page document {input_path}: {exc}") from exc
    print(f"Wrote {written}.")


def _handle_build(args: argparse.Namespace) -> None:
    config_path = Path(args.config)
    try:
        result = build_site(config_path)
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except INPUT_ERRORS as exc:
        raise SystemExit(f"Invalid build input for {config_path}: {exc}") from exc
    print(f"Wrote {len(result.written)} file(s) into {result.out_dir}.")


def _handle_validate(args: argparse.Namespace) -> None:
    errors: list[str] = []
    for raw_path in args.inputs:
        path = Path(raw_path)
        try:
            load_page(path)
        except FileNotFoundError as exc:
            errors.append(str(exc))
        except INPUT_ERRORS as exc:
            errors.append(f"{path}: {exc}")

    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        raise SystemExit(1)

    print(f"Validated {len(args.inputs)} page document(s).")


def _handle_tags(args: argparse.Namespace) -> None:
    for name, kind in sorted(TAGS.items()):
        if args.kind and kind != args.kind:
            continue
        print(f"{name}\t{kind}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmltree",
        description="Render declarative page documents to minified HTML.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render one page document.",
        description="Validate a YAML/JSON page document and write its HTML.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the page document (YAML or JSON).",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        required=True,
        help="Path to write the HTML, or '-' for stdout.",
    )
    render_parser.set_defaults(func=_handle_render)

    build_parser_ = subparsers.add_parser(
        "build",
        help="Render every page listed in a build config.",
        description="Render the pages of a build configuration into its out_dir.",
    )
    build_parser_.add_argument(
        "--config",
        default="htmltree.yaml",
        help="Path to the build configuration.",
    )
    build_parser_.set_defaults(func=_handle_build)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate page documents.",
        description="Check page documents against the schema without writing output.",
    )
    validate_parser.add_argument(
        "--in",
        dest="inputs",
        nargs="+",
        required=True,
        help="Page documents to validate.",
    )
    validate_parser.set_defaults(func=_handle_validate)

    tags_parser = subparsers.add_parser(
        "tags",
        help="List known element names.",
        description="List known element names and whether they take children.",
    )
    tags_parser.add_argument(
        "--kind",
        choices=["leaf", "parent"],
        default=None,
        help="Only list elements of this kind.",
    )
    tags_parser.set_defaults(func=_handle_tags)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
