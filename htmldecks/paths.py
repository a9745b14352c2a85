"""
Field paths: typed addresses of editable text inside a slide.

Each path has a stable string key (``title``, ``metrics.2.label``,
``table.1.3``, ``content.0``) that the editable surface carries in its
``data-field`` attributes and sends back with every event.
"""

from typing import Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field

from htmldecks.errors import InvalidFieldPath

TextFieldName = Literal[
    "title",
    "subtitle",
    "badge",
    "content",
    "left_column",
    "right_column",
    "quote",
    "attribution",
    "description",
    "image_url",
    "layout",
]
BulletColumn = Literal["content", "left_column", "right_column"]
MetricPart = Literal["number", "label"]


class _Path(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextField(_Path):
    """A whole top-level field of a slide."""

    kind: Literal["text"] = "text"
    name: TextFieldName

    @property
    def key(self) -> str:
        return self.name


class MetricField(_Path):
    """The number or label of one metric on a stats slide."""

    kind: Literal["metric"] = "metric"
    index: int = Field(ge=0)
    part: MetricPart

    @property
    def key(self) -> str:
        return f"metrics.{self.index}.{self.part}"


class TableCellField(_Path):
    """One cell of a table slide; row 0 is the header."""

    kind: Literal["cell"] = "cell"
    row: int = Field(ge=0)
    col: int = Field(ge=0)

    @property
    def key(self) -> str:
        return f"table.{self.row}.{self.col}"


class BulletField(_Path):
    """One bullet of a newline-delimited column."""

    kind: Literal["bullet"] = "bullet"
    column: BulletColumn
    index: int = Field(ge=0)

    @property
    def key(self) -> str:
        return f"{self.column}.{self.index}"


FieldPath = Union[TextField, MetricField, TableCellField, BulletField]


def _index(token: str, key: str) -> int:
    if not token.isdigit():
        raise InvalidFieldPath(f"Invalid index {token!r} in field path {key!r}")
    return int(token)


def parse_field_path(key: str) -> FieldPath:
    """
    Parse a field key produced by ``FieldPath.key``.

    Raises:
        InvalidFieldPath: if the key does not name an editable field
    """
    parts = key.split(".")
    head = parts[0]

    if len(parts) == 1:
        if head in get_args(TextFieldName):
            return TextField(name=head)

    elif head == "metrics" and len(parts) == 3:
        if parts[2] in get_args(MetricPart):
            return MetricField(index=_index(parts[1], key), part=parts[2])

    elif head == "table" and len(parts) == 3:
        return TableCellField(row=_index(parts[1], key), col=_index(parts[2], key))

    elif head in get_args(BulletColumn) and len(parts) == 2:
        return BulletField(column=head, index=_index(parts[1], key))

    raise InvalidFieldPath(f"Unknown field path: {key!r}")
