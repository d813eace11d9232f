"""Prompt that parses the user's text input into a value of any type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Optional, TypeVar

from asktty.errors import CustomUserError
from asktty.formatter import CustomTypeFormatter
from asktty.input import Input, InputAction, InputActionResult
from asktty.parser import CustomTypeParser, ParseError, parse_type

T = TypeVar("T")

CustomTypeValidator = Callable[[T], Optional[str]]
"""Returns None when the value is valid, or the error message to display."""

DEFAULT_ERROR_MESSAGE = "Invalid input"


@dataclass
class CustomType(Generic[T]):
    """Configuration of a prompt whose answer is parsed into a custom type.

    By default the input is parsed by calling ``type_`` on it and the answer
    is formatted with ``str``. Validators run in order; the first one that
    reports a problem stops validation and its message is shown.
    """

    message: str
    type_: Callable[[str], T] = str  # type: ignore[assignment]
    starting_input: Optional[str] = None
    default: Optional[T] = None
    placeholder: Optional[str] = None
    help_message: Optional[str] = None
    formatter: Optional[CustomTypeFormatter] = None
    default_value_formatter: Optional[CustomTypeFormatter] = None
    parser: Optional[CustomTypeParser] = None
    validators: list[CustomTypeValidator] = field(default_factory=list)
    error_message: str = DEFAULT_ERROR_MESSAGE

    def __post_init__(self) -> None:
        if self.formatter is None:
            self.formatter = str
        if self.default_value_formatter is None:
            self.default_value_formatter = str
        if self.parser is None:
            self.parser = parse_type(self.type_)
        self.validators = list(self.validators)

    def with_starting_input(self, message: str) -> CustomType[T]:
        """Set the initial text of the input (not the default answer)."""
        self.starting_input = message
        return self

    def with_default(self, default: T) -> CustomType[T]:
        """Set the value returned when the input is submitted empty."""
        self.default = default
        return self

    def with_placeholder(self, placeholder: str) -> CustomType[T]:
        """Set a short hint describing the expected input."""
        self.placeholder = placeholder
        return self

    def with_help_message(self, message: str) -> CustomType[T]:
        """Set the help message shown below the prompt."""
        self.help_message = message
        return self

    def with_formatter(self, formatter: CustomTypeFormatter) -> CustomType[T]:
        """Set how the final answer is displayed."""
        self.formatter = formatter
        return self

    def with_default_value_formatter(
        self, formatter: CustomTypeFormatter
    ) -> CustomType[T]:
        """Set how the default value is displayed next to the prompt."""
        self.default_value_formatter = formatter
        return self

    def with_parser(self, parser: CustomTypeParser) -> CustomType[T]:
        """Set the function turning the text input into a value."""
        self.parser = parser
        return self

    def with_validator(self, validator: CustomTypeValidator) -> CustomType[T]:
        """Append a validator."""
        self.validators.append(validator)
        return self

    def with_validators(
        self, validators: Iterable[CustomTypeValidator]
    ) -> CustomType[T]:
        """Append several validators, keeping their order."""
        self.validators.extend(validators)
        return self

    def with_error_message(self, error_message: str) -> CustomType[T]:
        """Set the message shown when the input cannot be parsed."""
        self.error_message = error_message
        return self

    def start(self) -> CustomTypePrompt[T]:
        """Create the running prompt state for this configuration."""
        return CustomTypePrompt(self)


class CustomTypePrompt(Generic[T]):
    """Running state of a CustomType prompt: its input, error and answer."""

    def __init__(self, config: CustomType[T]) -> None:
        self.message = config.message
        self.help_message = config.help_message
        self.default = config.default
        self.error: Optional[str] = None
        self.input = Input(config.starting_input or "")
        if config.placeholder is not None:
            self.input.with_placeholder(config.placeholder)
        self._formatter = config.formatter
        self._default_value_formatter = config.default_value_formatter
        self._parser = config.parser
        self._validators = list(config.validators)
        self._error_message = config.error_message

    def handle(self, action: InputAction) -> InputActionResult:
        """Apply a text-input action to the prompt's input."""
        return self.input.handle(action)

    def final_answer(self) -> T:
        """Return the answer for the current input.

        Empty input yields the default, when one is set. Raises ParseError
        carrying the configured error message when parsing fails.
        """
        if self.default is not None and not self.input.content:
            return self.default
        try:
            return self._parser(self.input.content)
        except ValueError as exc:
            raise ParseError(self._error_message) from exc

    def _validate(self, value: T) -> Optional[str]:
        for validator in self._validators:
            try:
                outcome = validator(value)
            except Exception as exc:
                raise CustomUserError(exc) from exc
            if outcome is not None:
                return outcome
        return None

    def submit(self) -> Optional[T]:
        """Try to finish the prompt.

        Returns the answer when it parses and passes validation; otherwise
        records the error message in ``error`` and returns None. Exceptions
        raised by validators are re-raised as CustomUserError.
        """
        try:
            answer = self.final_answer()
        except ParseError:
            self.error = self._error_message
            return None

        problem = self._validate(answer)
        if problem is not None:
            self.error = problem
            return None
        return answer

    def format_answer(self, answer: T) -> str:
        """Render a submitted answer for display."""
        return self._formatter(answer)

    def default_message(self) -> Optional[str]:
        """The default value as displayed next to the prompt, if there is one."""
        if self.default is None:
            return None
        return self._default_value_formatter(self.default)