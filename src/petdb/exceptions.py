class PetDatabaseError(Exception):
    """Base class for exceptions in this module."""


class ValidationError(PetDatabaseError):
    """Raised when a pet field or registry setting is out of range."""


class CapacityError(PetDatabaseError):
    """Raised when adding to a registry that is already full."""


class NotFoundError(PetDatabaseError):
    """Raised when an id does not refer to a pet in the registry."""


class ParseError(PetDatabaseError):
    """Raised when user input cannot be parsed."""


class ImmutableViewError(PetDatabaseError):
    """Raised when a read-only registry view is mutated."""


class PersistenceError(PetDatabaseError):
    """Raised when a data file exists but cannot be loaded."""


class EndOfInput(PetDatabaseError):
    """Raised when the console input stream is exhausted."""


class InvalidRecordError(PersistenceError):
    """Raised when a data file holds a pet that fails validation."""
