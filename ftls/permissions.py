"""Mode bits rendered as the ten-character permission column of a long listing."""

from __future__ import annotations

import stat

_TRIPLETS = ("---", "--x", "-w-", "-wx", "r--", "r-x", "rw-", "rwx")
_OCTAL_DIGITS = frozenset("01234567")

# Special-bit digits that mark a triplet, per owner class (1 user, 2 group, 3 other).
_FILE_SPECIAL = {1: "4567", 2: "2367", 3: "1357"}
_DIR_SPECIAL_WHEN_SET = {1: "456", 2: "236", 3: "135"}
_DIR_SPECIAL_WHEN_CLEAR = {1: "4567", 2: "2367", 3: "1357"}


def mode_to_octal(mode: int) -> str:
    """The low 16 bits of mode written in octal, without leading zeros."""
    return format(mode & 0xFFFF, "o")


def file_type_char(mode: int) -> str:
    """'-' for a regular file, 'd' for a directory, 'l' for a symlink, else ''."""
    if stat.S_ISREG(mode):
        return "-"
    if stat.S_ISDIR(mode):
        return "d"
    if stat.S_ISLNK(mode):
        return "l"
    return ""


def permission_triplet(octal: str, who: int, file_type: str) -> str:
    """The rwx triplet for one owner class of an octal mode string.

    who is 1 for the user, 2 for the group and 3 for others. For regular
    files and directories the set-id and sticky bits replace the last
    character with s, S, t or T.
    """
    if who not in (1, 2, 3):
        raise ValueError(f"owner class must be 1, 2 or 3, got {who}")
    if not octal or not set(octal) <= _OCTAL_DIGITS:
        raise ValueError(f"not an octal mode string: {octal!r}")
    digits = octal.rjust(3, "0")
    digit = digits[len(digits) - 4 + who]
    triplet = _TRIPLETS[int(digit)]
    if file_type == "-":
        special = digits[2]
        marking = _FILE_SPECIAL[who]
    elif file_type == "d":
        special = digits[1]
        marking = (
            _DIR_SPECIAL_WHEN_CLEAR[who] if digit == "0" else _DIR_SPECIAL_WHEN_SET[who]
        )
    else:
        return triplet
    if special in marking:
        letter = "t" if who == 3 else "s"
        if digit == "0":
            letter = letter.upper()
        triplet = triplet[:2] + letter
    return triplet


def mode_string(mode: int) -> str:
    """The full permission column: type character followed by three triplets."""
    octal = mode_to_octal(mode)
    kind = file_type_char(mode)
    return kind + "".join(permission_triplet(octal, who, kind) for who in (1, 2, 3))