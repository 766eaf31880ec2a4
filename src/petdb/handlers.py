from typing import Callable
from structlog import get_logger

from .config import Config
from .exceptions import CapacityError
from .menu import Menu
from .messages import Messages
from .pet import Pet
from .prompts import Rule, Terminal, ask, ask_many, parse_int, pet_parser
from .registry import Registry, name_matcher
from .tables import pet_table

log = get_logger()


class PetMenuHandler:
    """
    The pet database menu: view, add, update, remove and search pets.
    """

    def __init__(
        self,
        registry: Registry,
        terminal: Terminal,
        messages: Messages | None = None,
        config: Config | None = None,
    ):
        self.registry = registry
        self.terminal = terminal
        self.messages = messages or Messages()
        self.config = config or Config()
        self.table = pet_table(self.messages)
        self.parse_pet = pet_parser(self.config.age_range)
        msg = self.messages
        self.menu = (
            Menu(
                welcome=msg("menu_welcome"),
                delimiter=")",
                prompt=msg("menu_prompt"),
                invalid_choice=msg.templates["menu_invalid_choice"],
            )
            .add_item(msg("menu_view"), self.view_pets)
            .add_item(msg("menu_add"), self.add_pets)
            .add_item(msg("menu_update"), self.update_pet)
            .add_item(msg("menu_remove"), self.remove_pet)
            .add_item(msg("menu_search_name"), self.search_by_name)
            .add_item(msg("menu_search_age"), self.search_by_age)
        )
        self.menu.add_item(msg("menu_exit"), self.menu.exit)

    def run(self) -> None:
        self.menu.run(self.terminal)

    # section: helpers ########################################################

    def _pet_error(self, raw: str) -> None:
        age_hint = ""
        if self.config.age_range:
            low, high = self.config.age_range
            age_hint = self.messages("age_hint", min_age=low, max_age=high)
        self.terminal.error(
            self.messages("pet_parse_error", input=raw, age_hint=age_hint)
        )

    def _ask_id(self, prompt_key: str) -> int:
        return ask(
            self.terminal,
            self.messages(prompt_key),
            parse_int,
            Rule(
                check=self.registry.has,
                on_reject=lambda id: self.terminal.error(
                    self.messages("id_not_found", id=id)
                ),
            ),
            on_error=lambda raw: self.terminal.error(
                self.messages("id_parse_error", input=raw)
            ),
        )

    # section: actions ########################################################

    def view_pets(self, predicate: Callable[[Pet], bool] | None = None) -> None:
        self.terminal.show(self.table.render(self.registry.items(), predicate))

    def add_pets(self) -> None:
        if self.registry.is_full:
            self.terminal.error(self.messages("add_full_now"))
            return
        self.terminal.say(self.messages("add_intro", sentinel=self.config.sentinel))
        new_pets = ask_many(
            self.terminal,
            self.messages("add_prompt"),
            self.parse_pet,
            sentinel=self.config.sentinel,
            on_error=self._pet_error,
        )
        added = 0
        for pet in new_pets:
            try:
                self.registry.add(pet)
            except CapacityError as e:
                log.warning(
                    "add stopped", exception=str(e), dropped=len(new_pets) - added
                )
                self.terminal.error(
                    self.messages("add_full", dropped=len(new_pets) - added)
                )
                break
            added += 1
        self.terminal.say(self.messages("add_count", count=added))

    def update_pet(self) -> None:
        if not self.registry:
            self.terminal.say(self.messages("empty"))
            return
        self.view_pets()
        id = self._ask_id("update_id_prompt")
        pet = self.registry.get_by_id(id)
        old_name, old_age = pet.name, pet.age
        replacement = ask(
            self.terminal,
            self.messages("update_prompt"),
            self.parse_pet,
            on_error=self._pet_error,
        )
        self.registry.update(id, replacement.name, replacement.age)
        self.terminal.say(
            self.messages(
                "updated",
                old_name=old_name,
                old_age=old_age,
                name=pet.name,
                age=pet.age,
            )
        )

    def remove_pet(self) -> None:
        if not self.registry:
            self.terminal.say(self.messages("empty"))
            return
        self.view_pets()
        id = self._ask_id("remove_id_prompt")
        pet = self.registry.remove_by_id(id)
        self.terminal.say(self.messages("removed", name=pet.name, age=pet.age))

    def search_by_name(self) -> None:
        name = self.terminal.read_line(self.messages("search_name_prompt"))
        self.view_pets(
            name_matcher(name, case_sensitive=self.config.name_search_case_sensitive)
        )

    def search_by_age(self) -> None:
        age = ask(
            self.terminal,
            self.messages("search_age_prompt"),
            parse_int,
            Rule(
                check=lambda age: age >= 0,
                on_reject=lambda _: self.terminal.error(self.messages("age_negative")),
            ),
            on_error=lambda raw: self.terminal.error(
                self.messages("age_parse_error", input=raw)
            ),
        )
        self.view_pets(lambda pet: pet.age == age)
