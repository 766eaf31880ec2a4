"""
User-facing text, keyed by message name.

Templates use str.format placeholders.  A JSON object file can override
any subset of them.
"""
import json
from pathlib import Path

from .exceptions import PersistenceError

DEFAULT_MESSAGES = {
    "app_welcome": "Welcome to Pet Database.",
    "app_goodbye": "Goodbye!",
    "load_error": "Unable to load {path}: {error}",
    "permissive_hint": "If this file was saved with --permissive, run again with --permissive.",
    "save_error": "Unable to save {path}; changes from this session were lost.",
    "max_size_error": "Ignoring max size: {error}",
    "menu_welcome": "\nWhat would you like to do?",
    "menu_prompt": "Your choice: ",
    "menu_invalid_choice": "{choice} is not a valid choice. Please enter a number from 1 to {count}.",
    "menu_view": "View all pets",
    "menu_add": "Add more pets",
    "menu_update": "Update an existing pet",
    "menu_remove": "Remove an existing pet",
    "menu_search_name": "Search pets by name",
    "menu_search_age": "Search pets by age",
    "menu_exit": "Exit program",
    "add_intro": (
        "Let's add some pets to the database! Please provide each pet's name and age, "
        "separated by a space. For example, 'Rover 5'. Enter '{sentinel}' when finished."
    ),
    "add_prompt": "add pet (name, age): ",
    "pet_parse_error": (
        "Oops! There was an error parsing your input: {input}. Please make sure to "
        "format your input as 'name age'{age_hint}. Let's try again."
    ),
    "age_hint": " with an age from {min_age} to {max_age}",
    "add_full": "Error: Database is full. {dropped} pets were not added.",
    "add_full_now": "Error: Database is full. Remove a pet before adding more.",
    "add_count": "{count} pets added.",
    "update_id_prompt": "Enter the pet ID you want to update: ",
    "update_prompt": "Enter new name and new age: ",
    "updated": "{old_name} {old_age} changed to {name} {age}.",
    "remove_id_prompt": "Enter the pet ID to remove: ",
    "removed": "{name} {age} is removed.",
    "id_parse_error": "Could not parse {input} as an ID. Please try again.",
    "id_not_found": "ID {id} does not exist.",
    "empty": "There are no pets in the database.",
    "table_id": "ID",
    "table_name": "NAME",
    "table_age": "AGE",
    "table_count": "{count} rows in set.",
    "search_name_prompt": "Enter a name to search: ",
    "search_age_prompt": "Enter age to search: ",
    "age_parse_error": "Could not parse {input} as an integer. Please try again.",
    "age_negative": "Please enter an age of 0 or above.",
}


class Messages:
    def __init__(self, templates: dict[str, str] | None = None):
        self.templates = dict(DEFAULT_MESSAGES)
        if templates:
            self.templates.update(templates)

    def __repr__(self) -> str:
        return f"Messages({len(self.templates)} templates)"

    def __call__(self, key: str, **values) -> str:
        return self.templates[key].format(**values)


def load_messages(path: str | Path | None = None) -> Messages:
    if path is None:
        return Messages()
    try:
        overrides = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise PersistenceError(f"cannot read messages from {path}: {e}") from e
    if not isinstance(overrides, dict) or not all(
        isinstance(v, str) for v in overrides.values()
    ):
        raise PersistenceError(f"{path} must be a JSON object of strings")
    return Messages(overrides)
