"""
Whole-file persistence of a Registry as JSON.
"""
from pathlib import Path
import pydantic
from pydantic import BaseModel
from structlog import get_logger

from .exceptions import InvalidRecordError, PersistenceError, ValidationError
from .pet import AGE_RANGE, Pet
from .registry import Registry

log = get_logger()


class PetRow(BaseModel):
    name: str
    age: int


class RegistryFile(BaseModel):
    max_size: int | None = None
    pets: list[PetRow] = []


def load_registry(
    path: str | Path, age_range: tuple[int, int] | None = AGE_RANGE
) -> Registry:
    """
    Load a Registry from path.

    A missing file is created empty and an empty file is an empty Registry.
    Any other problem reading the file raises PersistenceError.
    """
    path = Path(path)
    if not path.exists():
        log.info("creating data file", path=str(path))
        try:
            path.touch()
        except OSError as e:
            raise PersistenceError(f"cannot create {path}: {e}") from e

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"cannot read {path}: {e}") from e
    if not text.strip():
        return Registry()

    try:
        data = RegistryFile.model_validate_json(text)
    except pydantic.ValidationError as e:
        raise PersistenceError(f"invalid data in {path}: {e}") from e
    try:
        pets = [Pet(row.name, row.age, age_range=age_range) for row in data.pets]
    except ValidationError as e:
        raise InvalidRecordError(f"invalid pet in {path}: {e}") from e
    try:
        registry = Registry(pets, max_size=data.max_size)
    except ValidationError as e:
        raise PersistenceError(f"invalid data in {path}: {e}") from e
    log.info("loaded", path=str(path), pets=len(registry))
    return registry


def save_registry(path: str | Path, registry: Registry) -> bool:
    """
    Write the whole registry to path, returning False if it could not be written.
    """
    data = RegistryFile(
        max_size=registry.max_size,
        pets=[PetRow(name=pet.name, age=pet.age) for pet in registry],
    )
    try:
        Path(path).write_text(data.model_dump_json(indent=2), encoding="utf-8")
    except (OSError, UnicodeEncodeError) as e:
        log.error("save failed", path=str(path), exception=str(e))
        return False
    log.info("saved", path=str(path), pets=len(registry))
    return True
