"""Drawing non-negative integers as three-row seven-segment style glyphs."""

from __future__ import annotations

GLYPHS: dict[str, tuple[str, str, str]] = {
    "0": ("._.", "|.|", "|_|"),
    "1": ("...", "..|", "..|"),
    "2": ("._.", "._|", "|_."),
    "3": ("._.", "._|", "._|"),
    "4": ("...", "|_|", "..|"),
    "5": ("._.", "|_.", "._|"),
    "6": ("._.", "|_.", "|_|"),
    "7": ("._.", "..|", "..|"),
    "8": ("._.", "|_|", "|_|"),
    "9": ("._.", "|_|", "..|"),
}
"""The three rows of every decimal digit."""


def render(number: int) -> str:
    """Return the picture of ``number``: three rows, each ending in a newline.

    Every digit cell is followed by a single space.
    """
    if number < 0:
        raise ValueError(f"cannot draw a negative number: {number}")
    digits = str(number)
    return "".join(
        "".join(GLYPHS[digit][row] + " " for digit in digits) + "\n"
        for row in range(3)
    )


def print_number(number: int) -> None:
    """Write the picture of ``number`` to standard output."""
    print(render(number), end="")