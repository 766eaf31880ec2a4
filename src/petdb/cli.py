import typer
import pydantic
from typing import Optional
from typing_extensions import Annotated

from .config import load_config
from .exceptions import InvalidRecordError, PersistenceError, ValidationError
from .handlers import PetMenuHandler
from .messages import load_messages
from .prompts import Terminal
from .storage import load_registry, save_registry

app = typer.Typer()


@app.command()
def main(
    data_file: Annotated[
        Optional[str], typer.Argument(help="Pet data file (default: pets.json).")
    ] = None,
    max_size: Annotated[
        Optional[int], typer.Option(help="Maximum number of pets.", min=0)
    ] = None,
    permissive: Annotated[
        bool, typer.Option("--permissive", help="Accept pets of any age.")
    ] = False,
) -> None:
    overrides: dict = {}
    if data_file:
        overrides["data_file"] = data_file
    if max_size is not None:
        overrides["max_size"] = max_size
    if permissive:
        overrides["validate_age"] = False
    try:
        config = load_config(**overrides)
        messages = load_messages(config.messages_file)
    except (pydantic.ValidationError, PersistenceError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.echo(messages("app_welcome") + "\n")
    try:
        registry = load_registry(config.data_file, config.age_range)
    except PersistenceError as e:
        typer.secho(
            messages("load_error", path=config.data_file, error=e), fg=typer.colors.RED
        )
        if isinstance(e, InvalidRecordError) and config.age_range:
            typer.secho(messages("permissive_hint"), fg=typer.colors.YELLOW)
        raise typer.Exit(1)

    if config.max_size is not None:
        try:
            registry.set_max_size(config.max_size)
        except ValidationError as e:
            typer.secho(messages("max_size_error", error=e), fg=typer.colors.YELLOW)

    PetMenuHandler(registry, Terminal(), messages, config).run()

    if not save_registry(config.data_file, registry):
        typer.secho(messages("save_error", path=config.data_file), fg=typer.colors.RED)
    typer.echo(messages("app_goodbye"))


if __name__ == "__main__":
    app()
