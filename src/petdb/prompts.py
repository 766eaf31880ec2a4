"""
Console prompts that repeat until the input is valid.
"""
import re
from typing import Any, Callable, TextIO, TypeVar
from pydantic import BaseModel, ConfigDict
from rich.console import Console, RenderableType
from structlog import get_logger

from .exceptions import EndOfInput, ParseError, ValidationError
from .pet import AGE_RANGE, Pet

log = get_logger()

T = TypeVar("T")

Parser = Callable[[str], T]
ErrorHandler = Callable[[str], None]


class Terminal:
    """
    Line-oriented console: prints through a rich Console, reads one line at a time.

    If `stream` is given lines are read from it instead of stdin.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None):
        self.console = console or Console(highlight=False)
        self.stream = stream

    def read_line(self, prompt: str) -> str:
        try:
            line = self.console.input(prompt, markup=False, stream=self.stream)
        except EOFError:
            raise EndOfInput("end of input") from None
        if self.stream is not None:
            # readline() returns "" only at end of stream
            if not line:
                raise EndOfInput("end of input")
            line = line.rstrip("\r\n")
        return line

    def say(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def error(self, text: str) -> None:
        self.console.print(
            text, style="red", markup=False, highlight=False, soft_wrap=True
        )

    def show(self, renderable: RenderableType) -> None:
        self.console.print(renderable)


class Rule(BaseModel):
    """
    An acceptance rule for a parsed value.

    check: returns True if the value is acceptable
    on_reject: called with the value when check fails
    """

    model_config = ConfigDict(frozen=True)

    check: Callable[[Any], bool]
    on_reject: Callable[[Any], None]


def _ignore(_: Any) -> None:
    pass


def _try_value(
    raw: str, parse: Parser[T], rules: tuple[Rule, ...], on_error: ErrorHandler
) -> tuple[bool, T | None]:
    try:
        value = parse(raw)
    except (ParseError, ValidationError) as e:
        log.debug("parse failed", input=raw, error=str(e))
        on_error(raw)
        return False, None
    for rule in rules:
        if not rule.check(value):
            log.debug("rule rejected", input=raw)
            rule.on_reject(value)
            return False, None
    return True, value


def ask(
    terminal: Terminal,
    prompt: str,
    parse: Parser[T],
    *rules: Rule,
    on_error: ErrorHandler = _ignore,
) -> T:
    """
    Prompt until a line parses and passes every rule, then return the parsed value.

    Args:
        terminal: where to prompt and read
        prompt: text shown before each read
        parse: converts a line to a value, raising ParseError (or ValidationError)
        rules: checked in order, the first failing rule's on_reject is called
        on_error: called with the raw line when parsing fails

    Raises EndOfInput if the input runs out first.
    """
    while True:
        raw = terminal.read_line(prompt)
        ok, value = _try_value(raw, parse, rules, on_error)
        if ok:
            return value  # type: ignore


def ask_many(
    terminal: Terminal,
    prompt: str,
    parse: Parser[T],
    *rules: Rule,
    sentinel: str = "done",
    on_error: ErrorHandler = _ignore,
) -> list[T]:
    """
    Like ask, but collects values until the sentinel line (case-insensitive)
    or the end of input.  The sentinel itself is never parsed.
    """
    values: list[T] = []
    while True:
        try:
            raw = terminal.read_line(prompt)
        except EndOfInput:
            break
        if raw.strip().casefold() == sentinel.casefold():
            break
        ok, value = _try_value(raw, parse, rules, on_error)
        if ok:
            values.append(value)  # type: ignore
    return values


# section: parsers ############################################################


def parse_int(text: str) -> int:
    # ASCII digits with an optional minus sign only
    if not re.fullmatch(r"-?[0-9]+", text.strip()):
        raise ParseError(f"{text!r} is not an integer")
    return int(text)


def pet_parser(age_range: tuple[int, int] | None = AGE_RANGE) -> Parser[Pet]:
    """
    Return a parser for lines of the form "name age".
    """

    def parse_pet(text: str) -> Pet:
        parts = text.split()
        if len(parts) != 2:
            raise ParseError(f"expected 'name age', got {text!r}")
        name, age = parts
        return Pet(name, parse_int(age), age_range=age_range)

    return parse_pet
