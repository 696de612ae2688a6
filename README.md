# uscriptkit

Small helpers for writing scripting and automation tools. The package uses
only the Python standard library.

## Modules

- `uscriptkit.logger`: a levelled line logger.
  - `LogLevel` orders the levels: `VERBOSE`, `DEBUG`, `INFO`, `WARNING`, `ERROR`, `FATAL`, `FIXED`.
  - `LogBuffer(stream=None)` builds up a message with `append` and `append_hex`,
    then writes it with `emit(level)` as one timestamped line. The line goes to
    `stream`, or to standard output, and is coloured when `use_colors` is set.
    `enable_file_logging(directory=None)` also writes lines to a
    `log_YYYYmmdd_HHMMSS.txt` file. `console_threshold` and `file_threshold`
    filter the lines each sink receives.
  - `get_logger` and `set_logger` give access to a shared logger.
  - `log_print(level, *args)` appends the arguments and emits the line.
  - `log_init(...)` configures the shared logger and `log_deinit()` closes its file.
- `uscriptkit.timer`: `Timer(context="")` is a context manager. It logs the elapsed
  seconds at `DEBUG` through the shared logger when the block exits.
  `elapsed()` returns the time measured so far.
- `uscriptkit.boolexpr`: `BoolExprParser().evaluate(text)` evaluates expressions built
  from `TRUE`, `FALSE`, `!`, `&&`, `||` and parentheses. It raises `BoolExprError`
  (a `ValueError`) on any invalid or leftover input. `string_to_bool` maps
  `TRUE`/`!FALSE` to `True`, and anything else to `False`.
- `uscriptkit.flags`: `FlagParser(flags)` reads case-encoded flags, where upper case
  means on and lower case means off. A letter given in both cases raises
  `ValueError`.
- `uscriptkit.hexdump`: these functions render bytes as offset/hex/ASCII columns.
  - `format_hexdump` returns the text.
  - `hexdump` writes the text and returns it.
  - `hexdump_flags` takes a flag string of `S`, `A`, `O` and `D` (spaces, ASCII,
    offset, decimal offset) in place of a `HexdumpOptions`.
- `uscriptkit.hexlify`: conversion between bytes and hex text.
  - `hexlify(data, offset=0, count=None)` and `unhexlify(text)` convert between
    bytes and upper-case hex text.
  - `hexlify_any(values, fmt, endian)` and `unhexlify_any(text, fmt)` encode typed
    values, given by a single `struct` format code. The text is prefixed with an
    `Endianness` marker byte.
- `uscriptkit.ini`: `IniParser` reads INI text with `loads` or files with `load`.
  - It offers `get_value`, `get_section` (raises `KeyError` if absent) and
    `section_exists`.
  - `IniParserEx` also resolves `${key}` and `${section:key}` references, up to
    `depth` levels. `get_resolved_section` resolves a whole section.
- `uscriptkit.numeric`: `str2int8` … `str2int64`, `str2uint8` … `str2uint64`,
  `str2float` and `str2double`.
  - The integer parsers accept decimal, `0x` hex, `0b` binary and leading-zero
    octal (see `detect_base`).
  - Failures raise `NumericError` (a `ValueError`).
  - `to_signed(text, bits)` and `to_unsigned(text, bits)` take any width.
- `uscriptkit.strings`: the remaining string helpers.
  - Trimming: `trim` and `trim_all`.
  - ASCII case conversion: `to_lower` and `to_upper`.
  - Splitting: `split_at_first`, `tokenize_whitespace`, `tokenize_char`,
    `tokenize`, `tokenize_any` and `tokenize_sequence`.
  - `join_strings` joins with a delimiter.
  - `replace_macros(text, macros, marker)` replaces marker-prefixed identifiers.

## Installation

```
pip install uscriptkit
```

## Examples

```python
from uscriptkit.boolexpr import BoolExprParser
from uscriptkit.hexdump import format_hexdump, HexdumpOptions
from uscriptkit.hexlify import hexlify, unhexlify
from uscriptkit.numeric import str2uint8
from uscriptkit.strings import replace_macros

BoolExprParser().evaluate("TRUE && !FALSE")      # True
hexlify(b"\x01\xab")                             # "01AB"
unhexlify("01ab")                                # b"\x01\xab"
str2uint8("0xFF")                                # 255
replace_macros("Hello $NAME", {"NAME": "Alice"}, "$")  # "Hello Alice"

print(format_hexdump(b"hello world", 8, HexdumpOptions(), colors=False))
```

INI files with references:

```python
from uscriptkit.ini import IniParserEx

ini = IniParserEx()
ini.loads("[paths]\nroot = /opt\nbin = ${root}/bin\n")
ini.get_value("paths", "bin")                    # "/opt/bin"
```

Timing a block:

```python
from uscriptkit.timer import Timer

with Timer("load") as timer:
    ...
timer.elapsed()
```

## What it does not do

This is a library only. It has no command-line program, and it does not load
or run plugins or scripts.

## Running the tests

```
pip install -e .[test]
pytest
```