# toycc

A small compiler front end in pure Python, with no dependencies. It has two
parts:

- A tokenizer for a C-like toy language of statements such as
  `int x = 42 + y;`.
- A front end for Kaleidoscope, a small expression language. It has a lexer,
  an operator-precedence parser that builds a syntax tree, and a read–parse
  loop.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Tokenizing the toy language

```python
from toycc.lexer import Lexer, tokenize
from toycc.tokens import TokenType

for token in tokenize("int x = 42 + y;"):
    print(token.type, token.value)

lexer = Lexer("a * (b - 1)")
first = lexer.next_token()
assert first.type is TokenType.IDENTIFIER
assert first.value == "a"
```

The lexer recognises these tokens:

- identifiers: a letter or `_`, then letters, digits or `_`
- numbers: runs of decimal digits
- `=`, `+`, `-`, `*`, `/`, `;`, `(` and `)`

Any other character comes back as a one-character `TokenType.UNKNOWN` token.
`Lexer.next_token()` returns a `TokenType.END_OF_FILE` token with an empty
value once the input runs out. Iterating over a `Lexer`, or calling
`tokenize(source)`, gives every token before that end-of-file token.

## Kaleidoscope

### Lexer

`toycc.kaleido_lexer.Lexer` reads from any text stream, one character at a
time. Each `Token` has a `kind` and a `value`:

- `Tok.DEF` and `Tok.EXTERN` for the keywords `def` and `extern`;
- `Tok.IDENTIFIER` for a letter followed by letters or digits, with the name
  as `value`;
- `Tok.NUMBER` for a run of digits and dots, with the value as a float. The
  longest leading number is used, so `1.2.3` reads as `1.2`, and a run with
  no digits reads as `0.0`;
- `Tok.EOF` at the end of the stream;
- the character itself for anything else, such as `"("` or `"+"`.

`#` starts a comment that runs to the end of the line.
`toycc.kaleido_lexer.tokenize(text)` lists every token of a string except the
final `Tok.EOF`.

### Parser

```python
import io
from toycc.kaleido_lexer import Lexer
from toycc.kaleido_parser import Parser, ParseError, default_precedence

parser = Parser(Lexer(io.StringIO("def add(a b) a + b * 2")), default_precedence())
function = parser.parse_definition()
print(function.proto.name, function.proto.args)   # add ('a', 'b')
```

`Parser` reads its first token when it is created and keeps one token of
look-ahead in `parser.current`. Its main methods are:

- `parse_definition()`: `def name(arg arg ...) expression`, giving a `Function`;
- `parse_extern()`: `extern name(arg arg ...)`, giving a `Prototype`;
- `parse_top_level_expr()`: a bare expression, wrapped in a `Function` whose
  prototype is named `__anon_expr` and has no arguments;
- `parse_expression()`, `parse_primary()` and `parse_prototype()` for the
  parts of the grammar.

Arguments in a prototype are separated by spaces. Arguments in a call are
separated by commas.

The default binary operators are `<` (10), `+` and `-` (20) and `*` (40). A
higher number binds more tightly, and operators of equal precedence group to
the left. You can pass your own table, mapping operator characters to
positive integers, as the second argument to `Parser`. If you leave it out,
the default table is used. A syntax error raises `ParseError`.

The syntax tree is built from the frozen dataclasses in `toycc.syntax`:
`NumberExpr`, `VariableExpr`, `BinaryExpr`, `CallExpr`, `Prototype` and
`Function`.

### The read–parse loop

```
toycc < program.kal
```

This reads Kaleidoscope from standard input and reports on standard error.
It writes a `ready> ` prompt before each item, and one line for each item:

- `Parsed a function definition.`
- `Parsed an extern`
- `Parsed a top-level expr`

A top-level `;` is skipped. When a parse fails, the loop writes
`Error: <message>`, skips one token and carries on.

To drive the loop from code, call `toycc.repl.run(stream, log)`. It takes any
text stream and a writable log stream; the log defaults to standard error. It
returns the `Function` and `Prototype` objects that parsed.

## Limitations

toycc is a front end only. It builds syntax trees, but it does not evaluate
them, check them or generate code. The read–parse loop only reports whether
each item parsed. There is no parser for the C-like toy language: only its
tokenizer is provided.