# bootstrapper/configuration/reflection.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import inspect
import sys
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    Describes one bindable property of an extension type.

    :param name: Property name as declared on the extension type.
    :param type: The declared type, or None when the property is unannotated.
    :param setter: Optional custom setter ``(instance, value)``; plain attribute
        assignment is used when omitted.
    """

    name: str
    type: Optional[Any] = None
    setter: Optional[Callable[[Any, Any], None]] = None

    def set_value(self, instance: Any, value: Any) -> None:
        """Assign value to this property on the given instance."""
        if self.setter is not None:
            self.setter(instance, value)
        else:
            setattr(instance, self.name, value)


class ExtensionPublicPropertyReflector:
    """
    Default reflector returning every publicly settable property of the
    extension's type: properties with a setter and annotated class attributes
    whose name does not start with an underscore. Read-only properties and
    ClassVar annotations are skipped.
    """

    def reflect(self, extension: Any) -> List[PropertyDescriptor]:
        cls = type(extension)
        descriptors: Dict[str, PropertyDescriptor] = {}

        # Walk base classes first so subclasses override what they redefine
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue

            members = vars(klass)
            for name, member in members.items():
                if name.startswith("_") or not isinstance(member, property):
                    continue
                if member.fset is None:
                    descriptors.pop(name, None)
                    continue
                descriptors[name] = PropertyDescriptor(name, _return_type(member.fget))

            for name, (raw, annotation) in _class_annotations(klass).items():
                if name.startswith("_") or isinstance(members.get(name), property):
                    continue
                if _is_class_var(annotation, raw):
                    continue
                descriptors[name] = PropertyDescriptor(name, annotation)

        return list(descriptors.values())


def _class_annotations(klass: type) -> Dict[str, Tuple[Any, Optional[Any]]]:
    """
    Map each annotation declared on klass itself to (raw, resolved). Names are
    resolved one by one, so an unresolvable annotation only leaves its own
    attribute untyped.
    """
    raw_annotations = inspect.get_annotations(klass)
    module = sys.modules.get(klass.__module__)
    globalns = vars(module) if module is not None else {}
    localns = dict(vars(klass))
    return {name: (raw, _resolve(raw, globalns, localns)) for name, raw in raw_annotations.items()}


def _return_type(fget: Optional[Callable[..., Any]]) -> Optional[Any]:
    if fget is None:
        return None
    raw = inspect.get_annotations(fget).get("return")
    return _resolve(raw, getattr(fget, "__globals__", {}), None)


def _resolve(raw: Any, globalns: Dict[str, Any], localns: Optional[Dict[str, Any]]) -> Optional[Any]:
    if not isinstance(raw, str):
        return raw
    try:
        return eval(raw, globalns, localns)  # nosec
    except (NameError, AttributeError, TypeError, SyntaxError):
        # Forward references to names unavailable at runtime stay untyped
        return None


def _is_class_var(annotation: Any, raw: Any) -> bool:
    if annotation is not None:
        return typing.get_origin(annotation) is typing.ClassVar or annotation is typing.ClassVar
    return isinstance(raw, str) and raw.replace("typing.", "").startswith("ClassVar")
