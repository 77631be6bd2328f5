"""Command-line front end that lists the primes between two borders."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_DIGITS = frozenset("0123456789")


class _UsageError(Exception):
    pass


def _help(appname: str) -> str:
    return (
        "This is an application for finding prime numbers in range\n"
        "Format for arguments:\n"
        + appname
        + " <left_border> <right_border> "
        "Where all arguments are positive integer more than 1."
        + "First argument must be less than second."
    )


def _parse(argument: str) -> int:
    if not argument or not set(argument) <= _DIGITS:
        raise _UsageError("Error occured: Wrong argument type.\n")
    return int(argument)


def _borders(arguments: Sequence[str]) -> tuple[int, int]:
    if len(arguments) > 2:
        raise _UsageError(
            "Error occured: Should be 2 arguments.\nYou entered more.\n"
        )
    if len(arguments) == 1:
        raise _UsageError(
            "Error occured: Should be 2 arguments.\nYou entered one.\n"
        )
    left = _parse(arguments[0])
    right = _parse(arguments[1])
    if right < left:
        raise _UsageError("Error occured: First arg more than second.\n")
    if left <= 1:
        raise _UsageError("Error occured: First arg <= 1.>\n")
    if right <= 1:
        raise _UsageError("Error occured: Second arg <= 1.>\n")
    return left, right


def run(argv: Sequence[str]) -> str:
    """Return the text the application prints for ``argv``.

    ``argv[0]`` is the program name. Without further arguments the help text
    is returned; bad arguments give an error message instead of the primes.
    """
    # Imported here to keep the argument handling usable on its own.
    from practicum.primes import primes_between

    appname = argv[0] if argv else ""
    if len(argv) <= 1:
        return _help(appname)
    try:
        left, right = _borders(argv[1:])
    except _UsageError as error:
        return str(error)
    return " ".join(str(p) for p in primes_between(left, right))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result of :func:`run` for the command line."""
    print(run(sys.argv if argv is None else argv))
    return 0