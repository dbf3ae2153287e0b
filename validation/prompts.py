"""
Prompt Module
Interactive re-prompting loops built on the field validators
"""

from decimal import Decimal
from typing import Callable, Optional, Sequence

import config
from errors import ValidationError
from validation import validators


READ_ERROR_MESSAGE = "Error reading input. Please try again."


class Prompter:
    """
    Console prompter

    Every method re-asks the same prompt until the input passes its
    validator. There is no retry cap. EOFError from the reader is left to
    propagate so a closed input stream abandons the flow.
    """

    def __init__(self, reader: Callable[[str], str] = input,
                 writer: Callable[[str], None] = print):
        self.reader = reader
        self.writer = writer

    def show_error(self, message: str):
        self.writer(f"[ERROR] {message}")

    def read_line(self, prompt: str) -> str:
        """Read one raw line, retrying the same prompt on read failures"""
        while True:
            try:
                line = self.reader(prompt)
            except OSError:
                self.show_error(READ_ERROR_MESSAGE)
                continue
            return '' if line is None else line

    def ask(self, prompt: str, parse: Callable[[str], object]):
        """Read lines until parse() accepts one"""
        while True:
            raw = self.read_line(prompt)
            try:
                return parse(raw)
            except ValidationError as e:
                self.show_error(str(e))

    # ===========================
    # TEXT FIELDS
    # ===========================

    def required_text(self, prompt: str) -> str:
        return self.ask(prompt, validators.parse_required_text)

    def optional_text(self, prompt: str) -> str:
        return self.ask(prompt, validators.parse_optional_text)

    def alpha(self, prompt: str) -> str:
        return self.ask(prompt, lambda raw: validators.parse_alpha(raw, required=True))

    def alpha_optional(self, prompt: str) -> str:
        return self.ask(prompt, lambda raw: validators.parse_alpha(raw, required=False))

    def phone_optional(self, prompt: str) -> str:
        return self.ask(prompt, validators.parse_phone)

    def digits_optional(self, prompt: str) -> str:
        return self.ask(prompt, validators.parse_digits)

    # ===========================
    # NUMERIC FIELDS
    # ===========================

    def int_in_range(self, prompt: str, min_value: int, max_value: int) -> int:
        return self.ask(
            prompt,
            lambda raw: validators.parse_int_in_range(raw, min_value, max_value)
        )

    def decimal_in_range(self, prompt: str, min_value: Decimal,
                         max_value: Decimal) -> Decimal:
        return self.ask(
            prompt,
            lambda raw: validators.parse_decimal_in_range(raw, min_value, max_value)
        )

    def decimal_min(self, prompt: str, min_value: Decimal) -> Decimal:
        return self.ask(
            prompt,
            lambda raw: validators.parse_decimal_min(raw, min_value)
        )

    def choose(self, prompt: str, options: Sequence[str]) -> int:
        """
        Print a numbered option list and return the chosen 0-based index
        """
        for i, option in enumerate(options, 1):
            self.writer(f"{i}) {option}")
        choice = self.int_in_range(f"{prompt} (1-{len(options)}): ", 1, len(options))
        return choice - 1

    # ===========================
    # ACCOUNT FIELDS
    # ===========================

    def email(self, prompt: str,
              is_taken: Optional[Callable[[str], bool]] = None) -> str:
        """
        Ask for an email address

        Args:
            prompt: Prompt text
            is_taken: Registration check; a True result rejects the address
        """
        def parse(raw: str) -> str:
            email = validators.parse_email(raw)
            if is_taken is not None and is_taken(email):
                raise ValidationError(
                    "Email already registered. Use another email or choose Login."
                )
            return email

        return self.ask(prompt, parse)

    def password_with_confirmation(self, create_prompt: str, confirm_prompt: str,
                                   min_length: int = config.PASSWORD_MIN_LENGTH) -> str:
        """Ask for a password twice; any failure restarts from the first entry"""
        while True:
            password = self.read_line(create_prompt)
            try:
                validators.check_password(password, min_length)
                confirm = self.read_line(confirm_prompt)
                return validators.check_confirmation(password, confirm)
            except ValidationError as e:
                self.show_error(str(e))

    def password(self, prompt: str) -> str:
        """Read a password exactly as typed; only an empty line is re-asked"""
        while True:
            password = self.read_line(prompt)
            if password:
                return password
            self.show_error("Input cannot be empty. Please provide a value.")

    def pause(self, message: str = "\nPress Enter to continue..."):
        self.writer(message)
        self.read_line('')

