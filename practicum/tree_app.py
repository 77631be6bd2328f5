"""Command-line front end that builds a binary tree and applies one operation."""

from __future__ import annotations

import enum
import re
import sys
from collections.abc import Sequence

from practicum.binary_tree import BinaryTree

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INTEGER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class Operation(enum.Enum):
    """The operations the application accepts."""

    ADD = "add"
    DELETE = "delete"
    FIND = "find"


class _ArgumentError(Exception):
    pass


def _help(appname: str, message: str = "") -> str:
    return (
        message
        + "This is a binary tree application.\n\n"
        + "Please provide arguments in the following format:\n\n"
        + "  $ "
        + appname
        + " <value_or_values> "
        + "<operation> <operand>\n\n"
        + "Where all arguments are integer numbers, "
        + "and <operation> is one of 'add', 'delete', 'find'.\n"
    )


def _has_digit(text: str) -> bool:
    return any(ch in "0123456789" for ch in text)


def _parse_int(argument: str) -> int:
    # A leading integer is read; whatever follows it is ignored.
    match = _INTEGER_PREFIX.match(argument)
    if match is None:
        raise _ArgumentError("ERROR: Cannot be cast to an integer!")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise _ArgumentError("ERROR : Number out of range!")
    return value


def _parse_operation(argument: str) -> Operation:
    try:
        return Operation(argument)
    except ValueError:
        raise _ArgumentError("ERROR: Wrong operation!") from None


def run(argv: Sequence[str]) -> str:
    """Return the text the application prints for ``argv``.

    ``argv[0]`` is the program name, then the tree's values, an operation
    and its operand.
    """
    appname = argv[0] if argv else ""
    if len(argv) <= 1:
        return _help(appname)
    if len(argv) < 4:
        return _help(appname, "ERROR: Should be at least 4 arguments.\n\n")
    if _has_digit(argv[-2]) or not _has_digit(argv[-1]):
        return _help(appname)

    try:
        values = [_parse_int(argument) for argument in argv[1:-2]]
        operation = _parse_operation(argv[-2])
        operand = _parse_int(argv[-1])
    except _ArgumentError as error:
        return str(error)

    tree = BinaryTree(values)
    if operation is Operation.ADD:
        tree.insert(operand)
        return f"Operand {operand} was added!\n"
    if operation is Operation.DELETE:
        tree.delete(operand)
        return f"Operand {operand} was deleted!\n"
    found = tree.find(operand)
    return f"Operand {operand}" + (" was founded!\n" if found else " not founded!\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result of :func:`run` for the command line."""
    print(run(sys.argv if argv is None else argv), end="")
    return 0