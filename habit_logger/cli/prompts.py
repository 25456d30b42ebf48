"""
Console input collection.

Every ``ask_*`` method keeps asking until the answer parses, and returns either
the parsed value or ``EARLY_EXIT`` when the user typed the exit keyword.
"""

from datetime import date, datetime
from typing import Callable, Optional, Sequence, TypeVar, Union

from habit_logger.errors import EARLY_EXIT, EarlyExit, ValidationError

T = TypeVar("T")

Answer = Union[T, EarlyExit]


def parse_non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError("Please enter a whole number.") from None
    if value < 0:
        raise ValidationError("Please enter a number that is 0 or greater.")
    return value


def parse_text(raw: str) -> str:
    value = raw.strip()
    if not value:
        raise ValidationError("This field cannot be empty.")
    return value


def parse_date(raw: str, date_format: str = "%d-%m-%Y", today: Optional[date] = None) -> date:
    try:
        value = datetime.strptime(raw.strip(), date_format).date()
    except ValueError:
        raise ValidationError(f"Please enter a date in the format {display_format(date_format)}.") from None
    if value > (today or date.today()):
        raise ValidationError("The date cannot be in the future.")
    return value


def parse_month(raw: str) -> int:
    value = parse_non_negative_int(raw)
    if not 1 <= value <= 12:
        raise ValidationError("Please enter a month between 1 and 12.")
    return value


def parse_year(raw: str) -> int:
    value = parse_non_negative_int(raw)
    if not 1 <= value <= 9999:
        raise ValidationError("Please enter a four digit year.")
    return value


def display_format(date_format: str) -> str:
    return date_format.replace("%d", "dd").replace("%m", "mm").replace("%Y", "yyyy")


class ConsolePrompter:
    def __init__(
        self,
        exit_keyword: str = "q",
        date_format: str = "%d-%m-%Y",
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.exit_keyword = exit_keyword.lower()
        self.date_format = date_format
        self.input_func = input_func
        self.output_func = output_func
        self.today = today or date.today

    def _ask(self, message: str, parse: Callable[[str], T]) -> Answer[T]:
        while True:
            raw = self.input_func(f"{message} ('{self.exit_keyword}' to go back): ").strip()
            if raw.lower() == self.exit_keyword:
                return EARLY_EXIT
            try:
                return parse(raw)
            except ValidationError as exc:
                self.output_func(f"Invalid input. {exc}")

    def ask_int(self, message: str) -> Answer[int]:
        return self._ask(message, parse_non_negative_int)

    def ask_text(self, message: str) -> Answer[str]:
        return self._ask(message, parse_text)

    def ask_date(self, message: str) -> Answer[date]:
        prompt = f"{message} ({display_format(self.date_format)})"
        return self._ask(prompt, lambda raw: parse_date(raw, self.date_format, self.today()))

    def ask_month(self, message: str = "Enter the month (1-12)") -> Answer[int]:
        return self._ask(message, parse_month)

    def ask_year(self, message: str = "Enter the year (yyyy)") -> Answer[int]:
        return self._ask(message, parse_year)

    def confirm(self, message: str) -> Answer[bool]:
        def parse_yes_no(raw: str) -> bool:
            answer = raw.lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            raise ValidationError("Please answer y or n.")

        return self._ask(f"{message} [y/n]", parse_yes_no)

    def choose(self, title: str, options: Sequence[str]) -> Answer[str]:
        self.output_func(title)
        for idx, option in enumerate(options, start=1):
            self.output_func(f"  {idx}. {option}")

        def parse_choice(raw: str) -> str:
            number = parse_non_negative_int(raw)
            if not 1 <= number <= len(options):
                raise ValidationError(f"Please choose a number between 1 and {len(options)}.")
            return options[number - 1]

        return self._ask("Choose an option", parse_choice)
