# improvedlib

A small collection of everyday helpers with the behaviour of the classic C
library routines, written for Python's own types.

- **`improvedlib.chars`**: ASCII character classification and case mapping
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`). Each accepts a one-character string or an integer code point;
  `to_upper` and `to_lower` return the same kind they were given.
- **`improvedlib.conversion`**: `atoi`, `itoa` and `uint_len`, with C `int`
  semantics (32-bit wrapping).
- **`improvedlib.strings`**: splitting, joining, searching, trimming and
  mapping strings (`split`, `count_words`, `strjoin`, `strchr`, `strrchr`,
  `strnstr`, `strncmp`, `strndup`, `strtrim`, `substr`, `striteri`,
  `strmapi`). Searches return an index, or `None` when nothing is found.
- **`improvedlib.memory`**: byte-buffer helpers working on `bytearray` or
  writable `memoryview` (`bzero`, `calloc`, `memset`, `memchr`, `memcmp`,
  `memcpy`, `memmove`, `strlcpy`, `strlcat`).
- **`improvedlib.linkedlist`**: a singly linked `LinkedList` of `Node`s, with
  `add_front`, `add_back`, `remove_first`, `clear`, `iterate`, `last`, `map`,
  `len()` and iteration.
- **`improvedlib.printf`**: `format_string` and `printf`, which understand
  `%c %s %p %d %i %u %x %X %%`; `printf` writes to a file descriptor.
- **`improvedlib.reader`**: `LineReader`, `get_next_line` and `reset`, which
  read a file descriptor one line at a time through a fixed-size buffer.

## Installation

```
pip install improvedlib
```

The package has no runtime dependencies.

## Examples

```python
from improvedlib.strings import split, strtrim, strchr
from improvedlib.conversion import atoi, itoa

split("  hello  world ", " ")    # ['hello', 'world']
strtrim("xxhixx", "x")           # 'hi'
strchr("hello", "l")             # 2
atoi("  -42abc")                 # -42
itoa(-2147483648)                # '-2147483648'
```

```python
from improvedlib.memory import calloc, strlcpy

buf = calloc(8, 1)               # bytearray(8)
strlcpy(buf, b"hello world", 8)  # 11; buf now holds b"hello w\0"
```

```python
from improvedlib.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
items.add_back(4)
doubled = items.map(lambda x: x * 2)
list(doubled)                    # [0, 2, 4, 6, 8]
len(items)                       # 5
items.remove_first()             # 0
```

```python
import sys
from improvedlib.printf import format_string, printf

format_string("%s is %d (%x)", "answer", 42, 42)   # 'answer is 42 (2a)'
printf(sys.stdout.fileno(), "%c%c\n", "o", "k")    # writes "ok\n", returns 3
```

An unknown conversion or a missing argument raises `FormatError`; an argument
of the wrong type raises `TypeError`. `printf` still writes what was formatted
before the error. File descriptor 0 is refused with `ValueError`.

```python
import os
from improvedlib.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line.decode(), end="")
os.close(fd)
```

Lines are returned as `bytes` and keep their trailing newline; the last line
may lack one. `get_next_line(fd)` keeps a reader per descriptor between calls
and returns `None` once the input is exhausted; `reset(fd)` forgets what was
buffered for it.

## What it does not do

This is a library only: it has no command-line program. `printf` supports no
flags, field widths or precision, only the conversions listed above.

## Running the tests

```
pip install -e ".[test]"
pytest
```