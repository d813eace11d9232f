"""Building blocks for terminal prompts: line editing, parsing, formatting, validation and autocompletion."""

__version__ = "0.1.0"

__all__ = [
    "ansi",
    "autocompletion",
    "confirm",
    "custom_type",
    "date_utils",
    "errors",
    "file_completer",
    "formatter",
    "input",
    "list_option",
    "parser",
]