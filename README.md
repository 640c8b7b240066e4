# ftls

`ftls` holds the building blocks of an `ls`-style directory lister:
parsing of the `-Ralrt1` options, rendering of stat modes as the
ten-character permission column, and a set of small character, number,
byte-buffer, string and linked-list helpers.

## Installation

```
pip install .
```

## Options

`ftls.options.parse_flags(argv)` reads leading option arguments (the
program name is not part of `argv`) and returns a `Flags` record together
with the remaining operands:

```python
from ftls.options import parse_flags, sort_operands

flags, operands = parse_flags(["-la", "/tmp"])
# flags.long_format and flags.show_all are True, operands == ["/tmp"]
```

Recognised options and the `Flags` fields they set:

- `-R` `recursive`
- `-a` `show_all`
- `-l` `long_format`
- `-r` `reverse`
- `-t` `sort_by_time`
- `-1` `one_per_line`

Options can be combined (`-Ralrt`) and repeated. A lone `-` is an
operand; an argument ending in `-`, such as `--`, ends option parsing.
An unknown option raises `IllegalOptionError`, whose message is
`illegal option -- x` and whose `option` attribute holds the character.
The module also provides the `USAGE` text.

`sort_operands(operands, reverse=False)` returns the operands in byte
order, descending when `reverse` is set.

## Permission strings

`ftls.permissions` turns a stat mode into the column a long listing
shows:

```python
from ftls.permissions import mode_string

mode_string(0o40755)   # 'drwxr-xr-x'
mode_string(0o100644)  # '-rw-r--r--'
```

- `mode_to_octal(mode)` writes the low 16 bits of the mode in octal
- `file_type_char(mode)` gives `-`, `d`, `l`, or an empty string for
  other kinds
- `permission_triplet(octal, who, file_type)` gives one `rwx` triplet
  for the user (1), group (2) or others (3); for regular files and
  directories the set-id and sticky bits show as `s`, `S`, `t` or `T`

## Helpers

The `ftls.libft` package contains:

- `chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_lower`, `to_upper` for ASCII characters or codes
- `numbers`: `atoi` (leading decimal integer, wrapping like a 32-bit
  int), `itoa`, `int_len`
- `memory`: `memalloc`, `bzero`, `memset`, `memcpy`, `memccpy`,
  `memmove`, `memchr`, `memcmp` working on `bytearray` objects
- `strings`: `strlen`, `strcmp`, `strncmp`, `strequ`, `strchr`,
  `strjoin`, `strncat`, `strlcat`, `strncpy`, `strmap`, `strmapi`,
  `striter`, `striteri`
- `search`: `strnequ`, `strnew`, `strstr`, `strnstr`, `strrchr`,
  `strsub`, `strtrim`, `strtrim_char`, `count_words`, `char_count`,
  `skip_char`, `strsplit`
- `lists`: `ContentList`, a singly linked list of `Node` objects growing
  at the front, with `push_front`, `pop_front`, `clear`, `iterate`, `map`,
  iteration and `len`

## What this package does not do

There is no `ftls` command. The package does not read directories,
gather file details such as owners, sizes and modification times, sort
entries, or print listings; it offers only the option parsing, permission
rendering and helpers described above.

## Running the tests

```
pip install .[test]
pytest
```