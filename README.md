# jsonoutliner

A small tokenizer and parser for JSON-like text. Besides strings, integers,
floats, booleans, arrays and objects, it also accepts bare snake_case
identifiers as *references*, e.g. `[my_reference_name]`.

## Installation

```
pip install jsonoutliner
```

## Parsing

```python
from jsonoutliner.parser import parse, ParseError

value = parse('{"a": 1234, "b": true, "c": {"d": false}}')
# {'a': 1234, 'b': True, 'c': {'d': False}}

items = parse('["test", 1, 912.21, my_ref]')
# ['test', 1, 912.21, Reference(name='my_ref')]

try:
    parse("[1,,2]")
except ParseError as exc:
    print(exc.kind)  # ErrorKind.DOUBLE_SEPARATORS
```

Values come back as plain Python objects: `str`, `int`, `float`, `bool`,
`list` and `dict`. Bare identifiers come back as
`jsonoutliner.value.Reference` instances (a frozen dataclass with a `name`
field; `str()` gives the name), so they stay apart from strings.

`ParseError` is a subclass of `ValueError`. Its `kind` attribute is an
`ErrorKind`: `LEXER`, `INVALID_TOKEN`, `INVALID_INTEGER`, `INVALID_BOOLEAN`,
`INVALID_NUMBER`, `DOUBLE_SEPARATORS` or `NONE` (no value in the text).
Integers must fit in a signed 64-bit range.

A `Parser` can be built from a string or from an existing lexer:

```python
from jsonoutliner.lexer import Lexer
from jsonoutliner.parser import Parser

parser = Parser.from_lexer(Lexer("[1, 2, 3]"))
parser.to_value()  # [1, 2, 3]
```

`to_value()` consumes the remaining tokens; if several top-level values
follow one another, the last one is returned.

## Tokenizing

`Lexer` is an iterator of `Token` objects. Each token has a `kind`
(a `TokenKind`), a `span` giving its place in the text, and the `data` it
covers:

```python
from jsonoutliner.lexer import Lexer

for token in Lexer("[true,false]"):
    print(token.kind, token.data, token.span.as_range())
```

Whitespace is reported as tokens of its own (`SPACING`, `TAB_SPACING`,
`NEW_LINE`); `Token.is_whitespace()` and `Token.is_value(include_reference)`
help to sort them. A number with two decimal points ends the iteration and
sets the lexer's `is_error` flag.

## What it does not do

- There is no `null` literal; the text `null` is read as a reference.
- Backslash escapes inside strings are kept as written, not decoded.
- It only reads; there is no writer that turns values back into text.
- There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```