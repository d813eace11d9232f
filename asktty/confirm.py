"""Yes/no confirmation prompt built on top of CustomType."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from asktty.custom_type import CustomType, CustomTypePrompt
from asktty.formatter import BoolFormatter, default_bool_formatter
from asktty.parser import BoolParser, default_bool_parser

DEFAULT_ERROR_MESSAGE = "Invalid answer, try typing 'y' for yes or 'n' for no"


def default_value_formatter(answer: bool) -> str:
    """Render a default of True as "Y/n" and False as "y/N"."""
    return "Y/n" if answer else "y/N"


@dataclass
class Confirm:
    """Configuration of a yes/no question.

    The input is parsed with ``parser`` (y/yes/n/no by default), the default
    value is shown through ``default_value_formatter`` and the final answer
    through ``formatter`` ("Yes"/"No" by default). Confirm prompts take no
    validators.
    """

    DEFAULT_ERROR_MESSAGE: ClassVar[str] = DEFAULT_ERROR_MESSAGE

    message: str
    starting_input: Optional[str] = None
    default: Optional[bool] = None
    placeholder: Optional[str] = None
    help_message: Optional[str] = None
    formatter: BoolFormatter = default_bool_formatter
    parser: BoolParser = default_bool_parser
    default_value_formatter: BoolFormatter = default_value_formatter
    error_message: str = DEFAULT_ERROR_MESSAGE

    def with_starting_input(self, message: str) -> Confirm:
        """Set the initial text of the input (not the default answer)."""
        self.starting_input = message
        return self

    def with_default(self, default: bool) -> Confirm:
        """Set the answer returned when the input is submitted empty."""
        self.default = default
        return self

    def with_placeholder(self, placeholder: str) -> Confirm:
        """Set a short hint describing the expected input."""
        self.placeholder = placeholder
        return self

    def with_help_message(self, message: str) -> Confirm:
        """Set the help message shown below the prompt."""
        self.help_message = message
        return self

    def with_formatter(self, formatter: BoolFormatter) -> Confirm:
        """Set how the final answer is displayed."""
        self.formatter = formatter
        return self

    def with_parser(self, parser: BoolParser) -> Confirm:
        """Set the function turning the text input into a bool."""
        self.parser = parser
        return self

    def with_error_message(self, error_message: str) -> Confirm:
        """Set the message shown when the input cannot be parsed."""
        self.error_message = error_message
        return self

    def with_default_value_formatter(self, formatter: BoolFormatter) -> Confirm:
        """Set how the default value is displayed next to the prompt."""
        self.default_value_formatter = formatter
        return self

    def to_custom_type(self) -> CustomType[bool]:
        """Return the equivalent CustomType configuration, without validators."""
        return CustomType(
            message=self.message,
            type_=bool,
            starting_input=self.starting_input,
            default=self.default,
            placeholder=self.placeholder,
            help_message=self.help_message,
            formatter=self.formatter,
            default_value_formatter=self.default_value_formatter,
            parser=self.parser,
            validators=[],
            error_message=self.error_message,
        )

    def start(self) -> CustomTypePrompt[bool]:
        """Create the running prompt state for this question."""
        return self.to_custom_type().start()