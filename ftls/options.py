"""Command-line option parsing and operand ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

PROGRAM = "ftls"
USAGE = f"usage: {PROGRAM} [-Ralrt] [file ...]"

_OPTION_FIELDS = {
    "R": "recursive",
    "a": "show_all",
    "l": "long_format",
    "r": "reverse",
    "t": "sort_by_time",
    "1": "one_per_line",
}


@dataclass
class Flags:
    """Options and listing state shared by the whole run."""

    long_format: bool = False
    show_all: bool = False
    reverse: bool = False
    recursive: bool = False
    sort_by_time: bool = False
    outside_list: bool = False
    indent_custom: bool = False
    one_dir: bool = False
    one_per_line: bool = False
    first: bool = True


class IllegalOptionError(Exception):
    """An option character that the program does not know."""

    def __init__(self, option: str) -> None:
        super().__init__(f"illegal option -- {option}")
        self.option = option


def parse_flags(argv: Iterable[str]) -> Tuple[Flags, List[str]]:
    """Read leading option arguments and return the flags and the operands.

    A lone "-" is an operand; a "-" ending an option argument, as in "--",
    ends option parsing.
    """
    args = list(argv)
    flags = Flags()
    index = 0
    while index < len(args) and len(args[index]) > 1 and args[index].startswith("-"):
        arg = args[index]
        for position, option in enumerate(arg[1:], start=1):
            if option == "-" and position == len(arg) - 1:
                return flags, args[index + 1:]
            field = _OPTION_FIELDS.get(option)
            if field is None:
                raise IllegalOptionError(option)
            setattr(flags, field, True)
        index += 1
    return flags, args[index:]


def _byte_key(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def sort_operands(operands: Iterable[str], reverse: bool = False) -> List[str]:
    """Operands in byte order, descending when reverse is set."""
    return sorted(operands, key=_byte_key, reverse=reverse)