"""Command-line calculator for two fractions."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from practicum.ratio import Ratio

_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")
_OPERATIONS = ("+", "-", "*", "/")


class _FormatError(Exception):
    pass


def _help(appname: str, message: str = "") -> str:
    return (
        message
        + "This is a ratio number calculator application.\n\n"
        + "Please provide arguments in the following format:\n\n"
        + "  $ "
        + appname
        + " <first_numerator> <first_denominator> "
        + "<second_numerator> <second_denominator> <operation>\n\n"
        + "Where all arguments are integer numbers, "
        + "and <operation> is one of '+', '-', '*', '/'.\n"
    )


def _parse_int(argument: str) -> int:
    # An empty argument reads as zero.
    if argument == "":
        return 0
    if not _INTEGER.fullmatch(argument):
        raise _FormatError("Wrong number format!")
    return int(argument.lstrip(" \t\n\v\f\r"))


def _parse_operation(argument: str) -> str:
    if argument not in _OPERATIONS:
        raise _FormatError("Wrong operation format!")
    return argument


def run(argv: Sequence[str]) -> str:
    """Return the text the calculator prints for ``argv``.

    ``argv[0]`` is the program name, followed by two numerator/denominator
    pairs and an operation. A fraction with a zero denominator raises
    ZeroDivisionError; division by a zero fraction gives an error message.
    """
    appname = argv[0] if argv else ""
    if len(argv) <= 1:
        return _help(appname)
    if len(argv) != 6:
        return _help(appname, "ERROR: Should be 5 arguments.\n\n")
    try:
        first_numerator, first_denominator, second_numerator, second_denominator = (
            _parse_int(argument) for argument in argv[1:5]
        )
        operation = _parse_operation(argv[5])
    except _FormatError as error:
        return str(error)

    first = Ratio(first_numerator, first_denominator)
    second = Ratio(second_numerator, second_denominator)

    if operation == "+":
        result = first + second
    elif operation == "-":
        result = first - second
    elif operation == "*":
        result = first * second
    else:
        try:
            result = first / second
        except ZeroDivisionError as error:
            return str(error)

    return f"Numerator = {result.numerator} Denominator = {result.denominator}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result of :func:`run` for the command line."""
    print(run(sys.argv if argv is None else argv))
    return 0