"""Tagged value types carried by filters and cursors."""

from typing import Annotated, Any, List, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class _Value(BaseModel):
    """Common base: immutable, compared by variant and payload."""

    model_config = ConfigDict(frozen=True)

    def __init__(self, value: Any = None, /, **data: Any):
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    def to_sql_string(self) -> str:
        """Render as a SQL literal."""
        raise NotImplementedError


class StringValue(_Value):
    kind: Literal["string"] = "string"
    value: StrictStr

    def to_sql_string(self) -> str:
        # Doubling quotes is the only escaping done at this layer
        return "'" + self.value.replace("'", "''") + "'"


class IntValue(_Value):
    kind: Literal["int"] = "int"
    value: StrictInt

    def to_sql_string(self) -> str:
        return str(self.value)


class FloatValue(_Value):
    kind: Literal["float"] = "float"
    value: StrictFloat

    def to_sql_string(self) -> str:
        return repr(float(self.value))


class BoolValue(_Value):
    kind: Literal["bool"] = "bool"
    value: StrictBool

    def to_sql_string(self) -> str:
        return "TRUE" if self.value else "FALSE"


class NullValue(_Value):
    kind: Literal["null"] = "null"

    def to_sql_string(self) -> str:
        return "NULL"


class ArrayValue(_Value):
    """List of values, used by ``in``, ``not_in`` and ``between``."""

    kind: Literal["array"] = "array"
    items: List["FilterValue"] = Field(default_factory=list)

    def __init__(self, items: Any = None, /, **data: Any):
        if items is not None:
            data["items"] = [to_filter_value(item) for item in items]
        super().__init__(**data)

    def to_sql_string(self) -> str:
        return "(" + ", ".join(item.to_sql_string() for item in self.items) + ")"


FilterValue = Annotated[
    Union[StringValue, IntValue, FloatValue, BoolValue, ArrayValue, NullValue],
    Field(discriminator="kind"),
]

# UUIDs travel as strings
CursorValue = Annotated[
    Union[StringValue, IntValue, FloatValue],
    Field(discriminator="kind"),
]

ArrayValue.model_rebuild()

VALUE_TYPES = (StringValue, IntValue, FloatValue, BoolValue, ArrayValue, NullValue)


def to_filter_value(raw: Any) -> FilterValue:
    """Wrap a plain Python value in the matching FilterValue variant.

    ``bool`` is checked before ``int`` since it is a subclass of it.
    Existing values pass through unchanged.

    Raises:
        TypeError: If the value has no FilterValue counterpart
    """
    if isinstance(raw, VALUE_TYPES):
        return raw
    if raw is None:
        return NullValue()
    if isinstance(raw, bool):
        return BoolValue(raw)
    if isinstance(raw, int):
        return IntValue(raw)
    if isinstance(raw, float):
        return FloatValue(raw)
    if isinstance(raw, (str, UUID)):
        return StringValue(str(raw))
    if isinstance(raw, (list, tuple)):
        return ArrayValue(raw)
    raise TypeError(f"Unsupported filter value type: {type(raw).__name__}")


def to_cursor_value(raw: Any) -> CursorValue:
    """Wrap a plain Python value in a CursorValue variant.

    Raises:
        TypeError: If the value is not a string, UUID, integer or float
    """
    if isinstance(raw, (StringValue, IntValue, FloatValue)):
        return raw
    if isinstance(raw, bool):
        raise TypeError("Cursor values cannot be booleans")
    if isinstance(raw, int):
        return IntValue(raw)
    if isinstance(raw, float):
        return FloatValue(raw)
    if isinstance(raw, (str, UUID)):
        return StringValue(str(raw))
    raise TypeError(f"Unsupported cursor value type: {type(raw).__name__}")


def python_value(value: FilterValue) -> Any:
    """Unwrap a FilterValue into the Python object it carries."""
    if isinstance(value, ArrayValue):
        return [python_value(item) for item in value.items]
    if isinstance(value, NullValue):
        return None
    return value.value
