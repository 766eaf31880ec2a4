from enum import Enum
from typing import Callable
from pydantic import BaseModel, ConfigDict
from structlog import get_logger

from .exceptions import EndOfInput
from .prompts import Terminal

log = get_logger()


class MenuState(Enum):
    """
    Where a Menu is in its run loop.

    idle: not started
    awaiting_choice: showing the items and waiting for a number
    dispatching: running the chosen item's action
    terminated: exit chosen or input exhausted
    """

    idle = "idle"
    awaiting_choice = "awaiting_choice"
    dispatching = "dispatching"
    terminated = "terminated"


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    action: Callable[[], None]


ItemFormatter = Callable[[int, str, str], str]


def default_formatter(index: int, delimiter: str, label: str) -> str:
    return f"{index}{delimiter} {label}"


class Menu:
    """
    Numbered console menu.

    Items are added with add_item and numbered from 1 in the order they
    were added.  The menu keeps running until an action calls exit() or
    the input runs out, so an exit item has to be registered explicitly:

        menu = Menu(welcome="What next?")
        menu.add_item("Say hi", hello).add_item("Exit", menu.exit)
        menu.run(terminal)
    """

    def __init__(
        self,
        *,
        welcome: str = "",
        delimiter: str = ")",
        prompt: str = "Your choice: ",
        invalid_choice: str = "{choice} is not a valid choice.",
        formatter: ItemFormatter = default_formatter,
    ):
        self.welcome = welcome
        self.delimiter = delimiter
        self.prompt = prompt
        self.invalid_choice = invalid_choice
        self.formatter = formatter
        self.items: list[MenuItem] = []
        self.state = MenuState.idle

    def __repr__(self) -> str:
        return f"Menu({len(self.items)} items, {self.state.value})"

    def add_item(self, label: str, action: Callable[[], None]) -> "Menu":
        self.items.append(MenuItem(label=label, action=action))
        return self

    def exit(self) -> None:
        self.state = MenuState.terminated

    def render(self) -> str:
        return "\n".join(
            self.formatter(index, self.delimiter, item.label)
            for index, item in enumerate(self.items, 1)
        )

    def choose(self, raw: str) -> MenuItem | None:
        try:
            index = int(raw.strip())
        except ValueError:
            return None
        if 1 <= index <= len(self.items):
            return self.items[index - 1]
        return None

    def run(self, terminal: Terminal) -> None:
        self.state = MenuState.awaiting_choice
        if self.welcome:
            terminal.say(self.welcome)
        while self.state != MenuState.terminated:
            terminal.say(self.render())
            try:
                raw = terminal.read_line(self.prompt)
            except EndOfInput:
                log.info("menu input exhausted")
                self.state = MenuState.terminated
                break

            item = self.choose(raw)
            if item is None:
                log.debug("invalid choice", choice=raw)
                terminal.error(
                    self.invalid_choice.format(choice=raw, count=len(self.items))
                )
                continue

            self.state = MenuState.dispatching
            log.info("dispatch", label=item.label)
            try:
                item.action()
            except EndOfInput:
                log.info("menu input exhausted", label=item.label)
                self.state = MenuState.terminated
            if self.state == MenuState.dispatching:
                self.state = MenuState.awaiting_choice
