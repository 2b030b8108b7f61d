"""Command-line interface.

Runs the block transform and the reference rewriter on single files, for
inspecting what a build would produce.

Usage:
    i18nscope block src/App.i18n.yaml --lang yaml --root .
    i18nscope rewrite dist/App.render.js --block src/App.i18n.json --root .
    i18nscope id src/App.vue --root .
    i18nscope --format json block src/App.i18n.yaml

Exit Codes:
    0   Success
    1   File-scoped error (unreadable file, malformed block or module)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from i18nscope.block import BlockIdentity, BlockOptions, decode_text, transform_block
from i18nscope.diagnostics import DiagnosticFormatter, OutputFormat, ScopeError
from i18nscope.edits import apply_edits
from i18nscope.enums import BlockLang
from i18nscope.identity import identifier_for
from i18nscope.registry import PathRegistry
from i18nscope.rewrite import rewrite_references
from i18nscope.syntax import parse_program

__all__ = ["build_parser", "lang_for_file", "main"]

logger = logging.getLogger(__name__)

_EXTENSION_LANGS: dict[str, BlockLang] = {
    ".json": BlockLang.JSON,
    ".json5": BlockLang.JSON5,
    ".yaml": BlockLang.YAML,
    ".yml": BlockLang.YML,
}


def lang_for_file(path: Path) -> BlockLang:
    """Block lang implied by a file extension; JSON when unrecognized."""
    return _EXTENSION_LANGS.get(path.suffix.lower(), BlockLang.JSON)


def _component_path(path: Path) -> str:
    return os.path.abspath(path)


def _report(error: ScopeError, args: argparse.Namespace) -> None:
    """Write a file-scoped error to stderr in the selected format."""
    diagnostic = error.diagnostic
    if diagnostic is None:
        print(f"[ERROR] {args.file}: {error}", file=sys.stderr)
        return
    if diagnostic.resource is None:
        diagnostic = replace(diagnostic, resource=str(args.file))
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        color=args.format == OutputFormat.RUST and sys.stderr.isatty(),
    )
    print(formatter.format(diagnostic), file=sys.stderr)


def _cmd_block(args: argparse.Namespace) -> int:
    lang = BlockLang.from_option(args.lang) if args.lang else lang_for_file(args.file)
    options = BlockOptions(lang=lang, locale=args.locale or None)
    if args.no_scope:
        registry = None
        identity = BlockIdentity.unscoped()
    else:
        registry = PathRegistry()
        identity = BlockIdentity.for_file(args.root, _component_path(args.file))

    sys.stdout.write(transform_block(args.file.read_bytes(), options, registry, identity))
    return 0


def _cmd_rewrite(args: argparse.Namespace) -> int:
    component = _component_path(args.file)
    identity = BlockIdentity.for_file(args.root, component)
    registry = PathRegistry()
    for block in args.block:
        options = BlockOptions(lang=lang_for_file(block))
        transform_block(block.read_bytes(), options, registry, identity)

    source = decode_text(args.file.read_bytes())
    program = parse_program(source)
    edits = rewrite_references(program, identity.file_id or "", registry)
    logger.info("Rewriting %d reference(s) in %s", len(edits), args.file)
    sys.stdout.write(apply_edits(source, edits))
    return 0


def _cmd_id(args: argparse.Namespace) -> int:
    print(identifier_for(args.root, _component_path(args.file)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its block, rewrite and id subcommands."""
    parser = argparse.ArgumentParser(
        prog="i18nscope",
        description="Scope vue-i18n translation blocks and references per component file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compile a block the way the loader would:
  i18nscope block src/components/Menu.i18n.yaml --root .

  # Rewrite a compiled render function against its component's block:
  i18nscope rewrite build/Menu.render.js --block src/components/Menu.i18n.yaml --root .
""",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log registrations, matches and edits",
    )
    parser.add_argument(
        "--format",
        choices=[str(fmt) for fmt in OutputFormat],
        default=str(OutputFormat.RUST),
        help="Error output style (default: rust)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    block = subparsers.add_parser("block", help="Print the installer module of a translation block")
    block.add_argument("file", type=Path, help="Translation block file")
    block.add_argument("--lang", help="json, json5, yaml or yml (default: from extension)")
    block.add_argument("--locale", help="Wrap the block's messages under this locale")
    block.add_argument("--root", default=os.getcwd(), help="Project root (default: cwd)")
    block.add_argument(
        "--no-scope",
        action="store_true",
        help="Emit messages without the file identifier prefix",
    )
    block.set_defaults(handler=_cmd_block)

    rewrite = subparsers.add_parser("rewrite", help="Print a compiled module with references scoped")
    rewrite.add_argument("file", type=Path, help="Compiled component module")
    rewrite.add_argument(
        "--block",
        type=Path,
        action="append",
        required=True,
        help="Translation block of the component (repeatable)",
    )
    rewrite.add_argument("--root", default=os.getcwd(), help="Project root (default: cwd)")
    rewrite.set_defaults(handler=_cmd_rewrite)

    ident = subparsers.add_parser("id", help="Print the FileIdentifier of a component file")
    ident.add_argument("file", type=Path, help="Component file")
    ident.add_argument("--root", default=os.getcwd(), help="Project root (default: cwd)")
    ident.set_defaults(handler=_cmd_id)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(args)
    except OSError as e:
        print(f"[ERROR] Cannot read file: {e}", file=sys.stderr)
        return 1
    except ScopeError as e:
        _report(e, args)
        return 1
