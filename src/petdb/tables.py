from typing import Callable, Generic, Iterable, Literal, TypeVar
from pydantic import BaseModel
from rich.table import Table

from .messages import Messages
from .pet import Pet

T = TypeVar("T")


class Column(BaseModel):
    header: str
    justify: Literal["left", "center", "right"] = "left"


class IndexedTable(Generic[T]):
    """
    Renders (id, item) pairs as a rich Table, with the id in the first column.
    """

    def __init__(
        self,
        row_mapper: Callable[[T], list[str]],
        index_column: Column,
        columns: Iterable[Column] = (),
        caption: str = "{count} rows in set.",
    ):
        self.row_mapper = row_mapper
        self.caption = caption
        self.index_column = index_column
        self.columns = list(columns)

    def add_column(self, column: Column) -> "IndexedTable[T]":
        self.columns.append(column)
        return self

    def render(
        self,
        entries: Iterable[tuple[int, T]],
        predicate: Callable[[T], bool] | None = None,
        title: str | None = None,
    ) -> Table:
        table = Table(title=title, caption_justify="left")
        for column in [self.index_column, *self.columns]:
            table.add_column(column.header, justify=column.justify)
        count = 0
        for index, item in entries:
            if predicate and not predicate(item):
                continue
            table.add_row(str(index), *self.row_mapper(item))
            count += 1
        table.caption = self.caption.format(count=count)
        return table


def pet_row(pet: Pet) -> list[str]:
    return [pet.name, str(pet.age)]


def pet_table(messages: Messages | None = None) -> IndexedTable[Pet]:
    msg = messages or Messages()
    return (
        IndexedTable(
            pet_row,
            Column(header=msg("table_id"), justify="right"),
            caption=msg.templates["table_count"],
        )
        .add_column(Column(header=msg("table_name")))
        .add_column(Column(header=msg("table_age"), justify="right"))
    )
