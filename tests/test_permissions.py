import stat

import pytest

from ftls.permissions import (
    file_type_char,
    mode_string,
    mode_to_octal,
    permission_triplet,
)


def test_mode_to_octal_regular_file():
    assert mode_to_octal(0o100644) == "100644"


def test_mode_to_octal_directory():
    assert mode_to_octal(0o40755) == "40755"


def test_mode_to_octal_masks_to_sixteen_bits():
    assert mode_to_octal(0o1100644) == mode_to_octal(0o100644)


def test_mode_to_octal_round_trip():
    for mode in (0o100644, 0o40755, 0o120777, 0o104755):
        assert int(mode_to_octal(mode), 8) == mode


@pytest.mark.parametrize(
    "mode, expected",
    [
        (stat.S_IFREG | 0o644, "-"),
        (stat.S_IFDIR | 0o755, "d"),
        (stat.S_IFLNK | 0o777, "l"),
        (stat.S_IFIFO | 0o644, ""),
    ],
)
def test_file_type_char(mode, expected):
    assert file_type_char(mode) == expected


@pytest.mark.parametrize(
    "who, expected",
    [(1, "rw-"), (2, "r--"), (3, "r--")],
)
def test_plain_file_triplets(who, expected):
    assert permission_triplet("100644", who, "-") == expected


def test_directory_triplets():
    assert [permission_triplet("40755", who, "d") for who in (1, 2, 3)] == [
        "rwx",
        "r-x",
        "r-x",
    ]


def test_mode_string_is_type_plus_triplets():
    result = mode_string(stat.S_IFREG | 0o644)
    assert result == "-" + "rw-" + "r--" + "r--"


def test_mode_string_length_for_files_and_dirs():
    for mode in (stat.S_IFREG | 0o600, stat.S_IFDIR | 0o700, stat.S_IFLNK | 0o777):
        assert len(mode_string(mode)) == 10


def test_setuid_with_exec_on_file():
    assert permission_triplet("104755", 1, "-") == "rws"


def test_sticky_without_exec_on_directory_is_upper_case():
    assert permission_triplet("41770", 3, "d")[2] == "T"


def test_setgid_without_group_bits_on_file_is_upper_case():
    assert permission_triplet("102700", 2, "-")[2] == "S"


def test_directory_with_all_special_bits_keeps_exec():
    assert mode_string(stat.S_IFDIR | 0o7777) == "d" + "rwx" * 3


def test_symlink_ignores_special_bits():
    assert permission_triplet("124777", 1, "l") == "rwx"


def test_invalid_owner_class():
    with pytest.raises(ValueError):
        permission_triplet("100644", 4, "-")


def test_invalid_octal_string():
    with pytest.raises(ValueError):
        permission_triplet("100948", 1, "-")