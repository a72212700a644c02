"""CLI entry point and subcommand definitions."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from simple_markdown.config import Config, ConfigError, get_config_path, load_config
from simple_markdown.emphasis import Literal, resolve, tokenize
from simple_markdown.parser import parse
from simple_markdown.serialize import to_json
from simple_markdown.tui.widgets.markdown_light import render_nodes


def _read_input(name: str) -> str:
    """Read a file, or stdin for '-'. Exits on read errors."""
    if name == "-":
        return sys.stdin.read()
    try:
        return Path(name).read_text()
    except OSError as e:
        print(f"Error: cannot read {name}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)


def _load_config(args: argparse.Namespace) -> Config:
    path = Path(args.config) if args.config else get_config_path()
    try:
        return load_config(path)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_render(args: argparse.Namespace) -> None:
    """Print the rendered document to the terminal."""
    config = _load_config(args)
    text = _read_input(args.file)
    nodes = parse(text, config.inline_rules(), font_scale=config.font_scale)
    Console().print(render_nodes(nodes))


def _cmd_dump(args: argparse.Namespace) -> None:
    """Print the parse tree as JSON."""
    config = _load_config(args)
    text = _read_input(args.file)
    nodes = parse(text, config.inline_rules(), font_scale=config.font_scale)
    print(to_json(nodes, indent=args.indent))


def _cmd_tokens(args: argparse.Namespace) -> None:
    """Show how emphasis markers in a string are tokenized and resolved."""
    tokens = tokenize(args.text)
    print("Tokens:")
    for token in tokens:
        if isinstance(token, Literal):
            print(f"  text  {token.text!r}")
        else:
            print(f"  run   {token.count}")
    print("Runs:")
    for run in resolve(tokens):
        flags = [name for name in ("bold", "italic") if getattr(run.style, name)]
        print(f"  {run.text!r} {' '.join(flags) or 'plain'}")


def _cmd_view(args: argparse.Namespace) -> None:
    """Launch the Textual viewer.

    Imports are deferred to avoid loading Textual for the other commands.
    """
    from simple_markdown.tui.app import ViewerApp  # noqa: PLC0415

    config = _load_config(args)
    path = Path(args.file)
    if not path.exists():
        print(f"Error: {path} does not exist", file=sys.stderr)
        sys.exit(1)
    ViewerApp(path, config.inline_rules(), config.font_scale).run()


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate subcommand."""
    parser = argparse.ArgumentParser(
        prog="simple-markdown",
        description="Render simplified Markdown in the terminal",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help=f"Config file (default: {get_config_path()})")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # render
    render_parser = subparsers.add_parser("render", help="Print a rendered document")
    render_parser.add_argument("file", help="Markdown file, or - for stdin")

    # dump
    dump_parser = subparsers.add_parser("dump", help="Print the parse tree as JSON")
    dump_parser.add_argument("file", help="Markdown file, or - for stdin")
    dump_parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")

    # tokens
    tokens_parser = subparsers.add_parser("tokens", help="Show emphasis tokens for a string")
    tokens_parser.add_argument("text", help="Text to tokenize")

    # view
    view_parser = subparsers.add_parser("view", help="Open a document in the viewer")
    view_parser.add_argument("file", help="Markdown file")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    dispatch = {
        "render": _cmd_render,
        "dump": _cmd_dump,
        "tokens": _cmd_tokens,
        "view": _cmd_view,
    }
    dispatch[args.command](args)
