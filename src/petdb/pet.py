from .exceptions import ValidationError

AGE_RANGE = (1, 20)


class Pet:
    """
    A single pet entry.

    A pet has no id of its own; its id is its position in a Registry.
    Fields are only changed through the setters, which validate first.
    """

    __slots__ = ("_name", "_age", "age_range")

    def __init__(
        self,
        name: str,
        age: int,
        *,
        age_range: tuple[int, int] | None = AGE_RANGE,
    ):
        self.age_range = age_range
        self._name = self._check_name(name)
        self._age = self._check_age(age)

    @classmethod
    def create(
        cls, name: str, age: int, age_range: tuple[int, int] | None = AGE_RANGE
    ) -> "Pet":
        return cls(name, age, age_range=age_range)

    def __repr__(self) -> str:
        return f"Pet({self._name}, {self._age})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pet):
            return NotImplemented
        return (self._name, self._age) == (other._name, other._age)

    __hash__ = None  # type: ignore

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    def rename(self, name: str) -> None:
        self._name = self._check_name(name)

    def set_age(self, age: int) -> None:
        self._age = self._check_age(age)

    def replace(self, name: str, age: int) -> None:
        """
        Replace both fields, or neither if either value is invalid.
        """
        name = self._check_name(name)
        age = self._check_age(age)
        self._name, self._age = name, age

    def _check_name(self, name: str) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Pet name cannot be empty")
        return name

    def _check_age(self, age: int) -> int:
        if isinstance(age, bool) or not isinstance(age, int):
            raise ValidationError(f"Pet age must be an integer, got {age!r}")
        if self.age_range is not None:
            low, high = self.age_range
            if age < low or age > high:
                raise ValidationError(
                    f"Invalid age {age}; must be between {low} and {high}"
                )
        return age
