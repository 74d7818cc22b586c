# bootstrapper/configuration/conversion.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import enum
import logging
import types
import typing
from typing import Any

from bootstrapper.configuration.reflection import PropertyDescriptor

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"true", "yes", "on", "1"})
_FALSE_VALUES = frozenset({"false", "no", "off", "0"})


def default_conversion(value: str, descriptor: PropertyDescriptor) -> Any:
    """
    Convert a raw configuration value to the declared type of the property.

    Unannotated, ``str`` and ``Any`` properties receive the raw string.
    ``Optional[X]`` converts to ``X``; other unions try each member in
    declaration order. Booleans accept true/false, yes/no,
    on/off and 1/0. Enums are matched by member name, then by value. Any other
    type is called with the raw string.

    :param value: The raw configuration value.
    :param descriptor: The property the value is bound to.
    :raises ValueError: If the value cannot be converted.
    """
    return convert(value, descriptor.type)


def convert(value: str, target: Any) -> Any:
    if typing.get_origin(target) in (typing.Union, types.UnionType):
        return _to_union(value, target)

    if target is None or target is Any or target is str:
        return value
    if target is bool:
        return _to_bool(value)
    if isinstance(target, type) and issubclass(target, enum.Enum):
        return _to_enum(value, target)
    if callable(target):
        return target(value)

    raise TypeError(f"Cannot convert configuration value to {target!r}.")


def _to_union(value: str, target: Any) -> Any:
    members = [arg for arg in typing.get_args(target) if arg is not type(None)]
    if len(members) == 1:
        return convert(value, members[0])

    # Members are tried in declaration order, the first successful one wins
    for member in members:
        try:
            converted = convert(value, member)
        except (ValueError, TypeError):
            logger.debug("Value '%s' is not a valid %r", value, member)
            continue
        logger.debug("Converted '%s' to %r of %r", value, member, target)
        return converted

    raise ValueError(f"'{value}' matches none of the types in {target!r}.")


def _to_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"'{value}' is not a valid boolean value.")


def _to_enum(value: str, target: typing.Type[enum.Enum]) -> enum.Enum:
    normalized = value.strip()
    for member in target:
        if member.name.lower() == normalized.lower():
            return member
    for member in target:
        if str(member.value) == normalized:
            return member
    raise ValueError(f"'{value}' is not a valid {target.__name__}.")
