from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

# Server ids are integers; optimistic placeholders use "tmp-<n>" tokens.
EntityId = Union[int, str]


class Record(BaseModel):
    """Immutable value record exchanged with the remote collections.

    Python code uses snake_case names, the wire uses camelCase.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Patch(BaseModel):
    """Partial update body: every field optional, only set fields are applied."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def to_wire(model: type[BaseModel], fields: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a partial field mapping to its JSON wire form."""
    out: dict[str, Any] = {}
    for name, value in fields.items():
        info = model.model_fields.get(name)
        key = info.alias if info is not None and info.alias else name
        out[key] = to_jsonable_python(value)
    return out
