"""Value model for the key-value store.

A stored value is exactly one of two variants: `Scalar` (a single string)
or `ListValue` (an ordered, duplicate-permitting list of strings). The
`ValueType` tag is derived from the variant and never stored separately.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Union


class ValueType(str, Enum):
    NONE = "none"
    STRING = "string"
    LIST = "list"


@dataclass
class Scalar:
    value: str


@dataclass
class ListValue:
    items: List[str] = field(default_factory=list)


Value = Union[Scalar, ListValue]


class KeyRef(NamedTuple):
    """Names one operand of a set-algebra operation."""

    namespace: str
    key: str


def type_of_value(value: Optional[Value]) -> ValueType:
    """Return the type tag for `value` (``None`` means the key is absent)."""
    if value is None:
        return ValueType.NONE
    if isinstance(value, Scalar):
        return ValueType.STRING
    if isinstance(value, ListValue):
        return ValueType.LIST
    raise TypeError(f"unknown value variant: {value!r}")
