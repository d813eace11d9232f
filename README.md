# asktty

Building blocks for yes/no and typed-value prompts in the terminal. The package has these parts:

- `asktty.input.Input` is a single-line editor. Its cursor counts grapheme clusters, and it moves or deletes by character, by word or by the whole line.
- `asktty.parser` and `asktty.formatter` turn text into values and values into display text. They cover booleans, any type built from a string, and dates.
- `asktty.custom_type.CustomType` configures a prompt whose answer is parsed into a value. `CustomType.start()` returns a `CustomTypePrompt`, which holds the input, the default, the validators and the current error message.
- `asktty.confirm.Confirm` configures a yes/no question. It is a `CustomType` for booleans with its own defaults.
- `asktty.autocompletion` defines the `Autocomplete` interface, and `as_autocomplete` turns a plain suggestion function into an autocompleter. `asktty.file_completer.FilePathCompleter` suggests file-system paths.
- `asktty.ansi` walks text that contains ANSI escape sequences, or strips those sequences out.
- `asktty.date_utils` has a `Month` enum and helpers for the current date and the first day of a month.
- `asktty.errors` holds the prompt error classes. All of them derive from `InquireError`.

## What it does not do

asktty does not draw anything on the terminal, and it does not read keys. There is no prompt loop and no command-line tool. Your own code reads the keystrokes and calls `CustomTypePrompt.handle` with `Write`, `MoveCursor` and `Delete` actions. When the user presses Enter, your code calls `submit()`. It then displays `format_answer(...)`, or `prompt.error` if the submission failed.

## Installation

```
pip install asktty
```

## Examples

### Parsing answers

```python
from asktty.parser import default_bool_parser, parse_type, ParseError

default_bool_parser("Yes")   # True
default_bool_parser("n")     # False

to_float = parse_type(float)
to_float("32.44")            # 32.44
try:
    to_float("32f")
except ParseError:
    ...
```

### Formatting answers

```python
import datetime
from asktty.formatter import default_bool_formatter, default_date_formatter

default_bool_formatter(True)                          # "Yes"
default_date_formatter(datetime.date(2021, 7, 25))    # "July 25, 2021"
```

### Editing a line of input

```python
from asktty.input import Input, Delete, Write, Magnitude, LineDirection

line = Input("great idea! you are a genius").with_cursor(15)
line.handle(Delete(Magnitude.WORD, LineDirection.LEFT))
line.content        # "great idea!  are a genius"
line.handle(Write("x"))
line.pre_cursor()   # "great idea! x"
```

### A yes/no question

```python
from asktty.confirm import Confirm
from asktty.input import Write

prompt = Confirm("Do you live in Brazil?").with_default(False).start()
prompt.default_message()   # "y/N"
prompt.submit()            # False: empty input gives the default

prompt = Confirm("Continue?").start()
prompt.handle(Write("c"))
prompt.submit()            # None
prompt.error               # "Invalid answer, try typing 'y' for yes or 'n' for no"
```

### A typed value with validation

```python
from asktty.custom_type import CustomType

prompt = (
    CustomType("How much do you want to donate?", type_=float)
    .with_starting_input("10.00")
    .with_formatter(lambda v: f"${v:.2f}")
    .with_validator(lambda v: None if v > 0 else "You must donate a positive amount")
    .start()
)
answer = prompt.submit()        # 10.0
prompt.format_answer(answer)    # "$10.00"
```

A validator returns `None` when the value is valid, and a message when it is not. If a validator raises an exception, `submit()` raises it again as `asktty.errors.CustomUserError`.

### Autocompletion

```python
from asktty.autocompletion import as_autocomplete
from asktty.file_completer import FilePathCompleter

names = as_autocomplete(lambda text: [n for n in ["Andrew", "Daniel"] if text.lower() in n.lower()])
names.get_suggestions("an")         # ["Andrew", "Daniel"]
names.get_completion("an", None)    # None

paths = FilePathCompleter()
paths.get_suggestions("./")         # up to 15 entries; directories end with "/"
```

### Stripping escape sequences

```python
from asktty.ansi import strip_ansi

strip_ansi("\x1b[92mHello, \x1b[91mWorld!\x1b[0m")   # "Hello, World!"
```

## Running the tests

```
pip install -e ".[test]"
pytest
```