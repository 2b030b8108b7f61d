"""ESTree program parsing and traversal.

Exports:
    parse_program: Parse JavaScript source into an ESTree dict tree (esprima)
    ProgramVisitor: Type-dispatching visitor over ESTree dicts
    iter_nodes / iter_children: Depth-first node iteration

Python 3.13+.
"""

from .program import Node, Program, parse_program, to_estree
from .visitor import ProgramVisitor, is_node, iter_children, iter_nodes

__all__ = [
    "Node",
    "Program",
    "ProgramVisitor",
    "is_node",
    "iter_children",
    "iter_nodes",
    "parse_program",
    "to_estree",
]
