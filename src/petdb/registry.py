from collections.abc import Sequence
from typing import Callable, Iterable, Iterator, overload
from structlog import get_logger

from .exceptions import (
    CapacityError,
    ImmutableViewError,
    NotFoundError,
    ValidationError,
)
from .pet import Pet

log = get_logger()


class PetView(Sequence):
    """
    Read-only, live view of the pets in a Registry.

    Changes must go through the Registry API; every mutating list method
    raises ImmutableViewError.
    """

    def __init__(self, pets: list[Pet]):
        self._pets = pets

    def __repr__(self) -> str:
        return f"PetView({self._pets!r})"

    def __len__(self) -> int:
        return len(self._pets)

    @overload
    def __getitem__(self, index: int) -> Pet:
        ...

    @overload
    def __getitem__(self, index: slice) -> list[Pet]:
        ...

    def __getitem__(self, index):
        return self._pets[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PetView):
            return self._pets == other._pets
        if isinstance(other, (list, tuple)):
            return self._pets == list(other)
        return NotImplemented

    def _immutable(self, *args, **kwargs):
        raise ImmutableViewError(
            "pets are read-only here, use the Registry to modify"
        )

    __setitem__ = _immutable
    __delitem__ = _immutable
    __iadd__ = _immutable
    append = _immutable
    insert = _immutable
    extend = _immutable
    remove = _immutable
    pop = _immutable
    clear = _immutable
    sort = _immutable
    reverse = _immutable


class Registry:
    """
    Ordered collection of pets, optionally capped at max_size.

    A pet's id is its zero-based position.  Removing a pet shifts the ids
    of every pet after it down by one.
    """

    def __init__(self, pets: Iterable[Pet] = (), max_size: int | None = None):
        self._pets: list[Pet] = list(pets)
        self._max_size: int | None = None
        self.set_max_size(max_size)

    def __repr__(self) -> str:
        return f"Registry({len(self)} pets, max_size={self._max_size})"

    def __len__(self) -> int:
        return len(self._pets)

    def __iter__(self) -> Iterator[Pet]:
        return iter(self._pets)

    @property
    def max_size(self) -> int | None:
        return self._max_size

    @property
    def is_full(self) -> bool:
        return self._max_size is not None and len(self._pets) >= self._max_size

    def set_max_size(self, max_size: int | None) -> None:
        if max_size is not None and max_size < len(self._pets):
            raise ValidationError(
                f"Max size {max_size} cannot be smaller than "
                f"current size {len(self._pets)}"
            )
        self._max_size = max_size

    # section: lookup #########################################################

    def has(self, id: int) -> bool:
        return 0 <= id < len(self._pets)

    def get_by_id(self, id: int) -> Pet:
        if not self.has(id):
            raise NotFoundError(f"No pet with id {id}")
        return self._pets[id]

    def items(self) -> Iterable[tuple[int, Pet]]:
        yield from enumerate(self._pets)

    def snapshot(self) -> PetView:
        return PetView(self._pets)

    def find(self, predicate: Callable[[Pet], bool]) -> list[tuple[int, Pet]]:
        return [(id, pet) for id, pet in self.items() if predicate(pet)]

    def filter_by_age(self, age: int) -> list[Pet]:
        return [pet for _, pet in self.find(lambda pet: pet.age == age)]

    def filter_by_name(self, name: str, *, case_sensitive: bool = True) -> list[Pet]:
        return [pet for _, pet in self.find(name_matcher(name, case_sensitive))]

    # section: changes ########################################################

    def add(self, pet: Pet) -> int:
        if self.is_full:
            raise CapacityError(f"Registry full ({self._max_size} pets)")
        self._pets.append(pet)
        id = len(self._pets) - 1
        log.debug("add", id=id, pet=pet)
        return id

    def update(self, id: int, name: str, age: int) -> Pet:
        pet = self.get_by_id(id)
        pet.replace(name, age)
        log.debug("update", id=id, pet=pet)
        return pet

    def remove_by_id(self, id: int) -> Pet:
        if not self.has(id):
            raise NotFoundError(f"No pet with id {id}")
        pet = self._pets.pop(id)
        log.debug("remove", id=id, pet=pet)
        return pet


def name_matcher(name: str, case_sensitive: bool = True) -> Callable[[Pet], bool]:
    if case_sensitive:
        return lambda pet: pet.name == name
    folded = name.casefold()
    return lambda pet: pet.name.casefold() == folded
