"""JavaScript program parsing.

Parses compiled component code with esprima into an ESTree program made of
plain dicts and lists, with a half-open `range` of character offsets on every
node. Dict trees are the same shape as the JSON dumps of other ESTree
parsers, so the rewriter can also be handed a tree produced elsewhere.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TypeAlias

import esprima
from esprima.error_handler import Error as EsprimaError

from i18nscope.diagnostics import DepthLimitExceededError, ErrorTemplate, ProgramSyntaxError
from i18nscope.enums import ModuleDialect

__all__ = ["Node", "Program", "parse_program", "to_estree"]

logger = logging.getLogger(__name__)

Node: TypeAlias = dict[str, Any]
Program: TypeAlias = dict[str, Any]

_SCALARS = (str, int, float, bool, type(None))


def _shell(value: Any) -> tuple[Any, list[tuple[Any, Any]]]:
    """Return an empty plain copy of value plus its (key, child) pairs to fill in."""
    if isinstance(value, _SCALARS):
        return value, []
    if isinstance(value, (list, tuple)):
        return [None] * len(value), list(enumerate(value))
    if isinstance(value, dict):
        items = list(value.items())
    elif hasattr(value, "__dict__"):
        items = list(vars(value).items())
    else:
        # Regular expression literal values and other host objects
        return value, []
    return dict.fromkeys(key for key, _ in items), items


def to_estree(value: Any) -> Any:
    """Convert esprima node objects into plain ESTree dicts and lists.

    Conversion keeps an explicit stack, so deeply nested expressions (long
    string concatenations in bundled code) convert without recursion.
    """
    root, items = _shell(value)
    pending = [(root, items)]
    while pending:
        target, items = pending.pop()
        for key, item in items:
            copy, nested = _shell(item)
            target[key] = copy
            if nested:
                pending.append((copy, nested))
    return root


def _parse(source: str, *, module: bool) -> Any:
    parse = esprima.parseModule if module else esprima.parseScript
    return parse(source, {"range": True})


def parse_program(source: str, *, dialect: ModuleDialect = ModuleDialect.AUTO) -> Program:
    """Parse JavaScript source into an ESTree program.

    ESM sources are parsed as modules and dynamic sources as scripts; auto
    sources are tried as a module first, then as a script.

    Args:
        source: Compiled component code
        dialect: Module dialect the source was registered under

    Returns:
        Program node as nested dicts with `range` on every node

    Raises:
        ProgramSyntaxError: If the source cannot be parsed
        DepthLimitExceededError: If the source nests beyond what the parser
            can descend into
    """
    try:
        match dialect:
            case ModuleDialect.ESM:
                tree = _parse(source, module=True)
            case ModuleDialect.DYNAMIC:
                tree = _parse(source, module=False)
            case _:
                try:
                    tree = _parse(source, module=True)
                except EsprimaError:
                    logger.debug("Module parse failed, retrying as script")
                    tree = _parse(source, module=False)
    except EsprimaError as e:
        raise ProgramSyntaxError(ErrorTemplate.program_syntax_error(str(e))) from e
    except RecursionError as e:
        # esprima descends recursively into nested calls and parentheses
        raise DepthLimitExceededError(
            ErrorTemplate.depth_exceeded(sys.getrecursionlimit(), "program")
        ) from e
    return to_estree(tree)
