# libmini

A small toolkit of everyday helpers, with no third-party dependencies.

## Modules

- `libmini.text` – character classes (`is_alnum`, `is_alpha`, `is_ascii`,
  `is_digit`, `is_print`) and case conversion (`to_lower`, `to_upper`), each
  taking a one-character string or an integer code; `absolute`; lenient
  number parsing (`parse_int` wraps to 32 bits, `parse_long` to 64 bits,
  `parse_float` accepts `.` or `,` before the fraction); `int_to_str`;
  `split` on a single separator character, dropping empty pieces; and
  `find_char` / `rfind_char`, which return an index or `None`.
- `libmini.strops` – string operations with bounded semantics: `join`,
  `bounded_copy` and `bounded_concat` (each returns the resulting text and
  the length the full result would have had), `map_chars`, `iter_chars`,
  `compare` (difference of the first differing character codes; a limit of
  0 gives -1), `find_substring` (index or `None`), `trim` and `substring`.
- `libmini.linereader` – `LineReader`, which reads a file descriptor or a
  file object `buffer_size` units at a time (10 by default) and returns one
  line per `read_line()` call, newline included, or `None` at the end. It is
  also iterable. Lines are `bytes` or `str`, whichever the source produces.
- `libmini.linkedlist` – a singly linked `LinkedList` of `ListNode`s with
  `push_front`, `push_back`, `last`, `len()`, iteration, `for_each`, `map`
  and `clear`.
- `libmini.tree` – a shell syntax-tree model: `NodeType` (command, pipe,
  `&&`, `||`, the redirections and heredoc), `Command` (arguments, path and
  file descriptors) and `AstNode` with `set_root` and `walk`. `node_label`,
  `format_node`, `format_tree` and `print_tree` produce readable dumps.

## Installation

```
pip install .
```

## Examples

```python
from libmini.text import parse_int, split, find_char
from libmini.strops import bounded_copy, trim

parse_int("  -42abc")            # -42
split("  a b  c ", " ")          # ["a", "b", "c"]
find_char("hello", "l")          # 2
bounded_copy("hello", 3)         # ("he", 5)
trim("xxhixx", "x")              # "hi"
```

```python
import io
from libmini.linereader import LineReader

for line in LineReader(io.StringIO("one\ntwo\n"), 10):
    print(line, end="")
```

```python
from libmini.tree import AstNode, Command, NodeType, print_tree

# cat file | grep foo
pipe = AstNode(
    NodeType.PIPE,
    children=[
        AstNode(NodeType.CMD, cmd=Command(args=["cat", "file"])),
        AstNode(NodeType.CMD, cmd=Command(args=["grep", "foo"])),
    ],
)
pipe.set_root(pipe)
print_tree(pipe)
```

## What it does not do

- There is no printf-style formatter and no helpers for writing characters,
  strings or numbers to a file descriptor; use Python's own formatting and
  `print`.
- There are no raw byte-buffer operations (fill, copy, move, search,
  compare); use `bytearray` and `memoryview` directly.
- There are no ready-made example trees; trees are built from `AstNode`
  values as shown above.
- Nothing here parses a command line into a tree or executes one; the tree
  model is for representing and inspecting commands only.

## Running the tests

```
pip install .[test]
pytest
```