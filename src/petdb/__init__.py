from .pet import Pet  # noqa
from .registry import Registry  # noqa
