"""
Tri-state update fields.

An update struct field is either UNSET (client did not send it), None (client sent
null) or a concrete value. Null clears only nullable fields; on any other field it
is ignored, same as an empty string or zero.
"""

from enum import Enum
from typing import Any, Final, Literal, TypeAlias

import attrs


class _Unset(Enum):
    UNSET = 'UNSET'

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset.UNSET
UnsetType: TypeAlias = Literal[_Unset.UNSET]


def is_set(value: object) -> bool:
    return value is not UNSET


def is_blank(value: object) -> bool:
    """Null, empty string or zero: sent, but leaves the stored value untouched."""
    if value is None or value == '':
        return True
    return isinstance(value, int | float) and value == 0


def sent_values(update: object, *, clearable: frozenset[str] = frozenset()) -> dict[str, Any]:
    """
    Fields of an attrs update struct to write.

    Blank values are dropped like unsent ones, except a null on a `clearable` field,
    which clears it.
    """
    values: dict[str, Any] = {}
    for field in attrs.fields(type(update)):
        value = getattr(update, field.name)
        if not is_set(value):
            continue
        if value is None and field.name in clearable:
            values[field.name] = None
        elif not is_blank(value):
            values[field.name] = value
    return values
