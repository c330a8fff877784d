# loxlang

loxlang is a small tree-walking interpreter for a subset of the Lox scripting language.

## What the language covers

- number, string, boolean and `nil` literals
- unary `-` and `!`
- arithmetic with `+ - * /`. The `+` operator also joins two strings.
- comparisons with `< <= > >=`, and equality with `== !=`
- grouping with parentheses
- `print` statements and expression statements. Each one ends in `;`.
- `//` line comments and `/* ... */` block comments

Values print as follows:

- Numbers print with six decimal places, so `print 10 / 4;` prints `2.500000`.
- Strings print without quotes.
- Booleans print as `true` and `false`.
- `nil` prints as `NIL`.

Some operations do not raise an error:

- Dividing a non-zero number by zero gives an infinity.
- Dividing `0 / 0` gives NaN.

The right operand of a comparison is parsed at multiplication level. This means `1 < 2 + 3` groups as `(1 < 2) + 3`. That expression then fails at run time.

## Not supported

The package does not have:

- variables
- assignment
- blocks
- control flow
- functions
- classes

The scanner recognises their keywords and symbols, for example `var`, `if`, `{` and `=`. The parser does not accept them and reports `Expect expression.` instead.

## Installation

```
pip install .
```

## Command line

Run a script file:

```
loxlang script.lox
```

Start an interactive prompt. The prompt shows `>`. An empty line or the end of input ends the session:

```
loxlang
```

Exit statuses:

| Status | When |
|--------|------|
| 64 | More than one argument was given. The command prints `Usage: loxlang [script]`. |
| 65 | A script had a scan, parse or runtime error. |
| 66 | The script file could not be read. |
| 0 | In every other case. |

Errors are printed to standard output in this form:

```
[line 1], Error : Expect expression.
```

## Example

```
print (1 + 2) * 3;     // 9.000000
print "con" + "cat";   // concat
print !nil == true;    // true
```

## Library use

```python
import io
from loxlang.lox import Lox

out = io.StringIO()
Lox(out).run("print 10 / 4;")
assert out.getvalue() == "2.500000\n"
```

`Lox` has three methods:

- `run(source)` runs one piece of text.
- `run_file(path)` runs a file and returns the exit status.
- `run_prompt(stream)` reads lines from any iterable of strings.

You can also use each part on its own:

- `loxlang.scanner.Scanner(source).scan_tokens()` returns a list of `Token`s. The list always ends with an `ENDOFFILE` token.
- `loxlang.parser.Parser(tokens).parse()` returns a list of statement nodes from `loxlang.nodes`. It raises `loxlang.errors.ParseError` on the first syntax error.
- `loxlang.interpreter.Interpreter(out).interpret(statements)` runs the statements.
  - It writes printed values to `out`.
  - It stops at the first runtime error and reports it.
  - After an error, it sets `was_error`.
- `loxlang.astprinter.AstPrinter().print(node)` renders a node in parenthesised prefix form, for example `(* (- 123.000000) (group 45.670000))`.

Helper functions:

- `loxlang.interpreter.is_truthy` treats `nil` and `false` as false.
- `loxlang.interpreter.is_equal` compares two values. Values of different types are never equal.
- `loxlang.tokens.stringify` renders a value as text.

Errors go through `loxlang.errors.ErrorReporter`. It writes each message and records `had_error`.

## Running the tests

```
pip install .[test]
pytest
```