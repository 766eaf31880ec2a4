import io
from rich.console import Console
from petdb.pet import Pet
from petdb.prompts import Terminal
from petdb.registry import Registry


def five_pets() -> list[Pet]:
    return [
        Pet("Rex", 4),
        Pet("Fido", 2),
        Pet("Kitty", 7),
        Pet("rex", 4),
        Pet("Spot", 12),
    ]


def full_registry() -> Registry:
    registry = Registry(five_pets())
    registry.set_max_size(5)
    return registry


def fake_terminal(*lines: str) -> Terminal:
    """Terminal that reads the given lines and records output in a StringIO."""
    console = Console(
        file=io.StringIO(), width=100, color_system=None, force_terminal=False
    )
    stream = io.StringIO("".join(f"{line}\n" for line in lines))
    return Terminal(console=console, stream=stream)


def output(terminal: Terminal) -> str:
    return terminal.console.file.getvalue()  # type: ignore
