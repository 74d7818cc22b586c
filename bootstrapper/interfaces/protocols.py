# bootstrapper/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Any, Iterable, Optional, Protocol, runtime_checkable

from bootstrapper.interfaces.types import ConfigurationMap, ConversionCallback, ConversionCallbackMap, SectionName

if TYPE_CHECKING:
    from bootstrapper.configuration.reflection import PropertyDescriptor
    from bootstrapper.configuration.section import ConfigurationSection


@runtime_checkable
class Extension(Protocol):
    """
    Extension protocol for type checking.

    Methods:
        name: Human readable extension name.
        describe(): Returns a short description of what the extension does.

    Runtime Invariants:
    - Extensions are created by the host before any behavior runs.
    - Public settable properties are candidates for configuration binding.
    """

    @property
    def name(self) -> str:
        """The extension name."""
        ...

    def describe(self) -> str:
        """Describe the extension."""
        ...


@runtime_checkable
class HasConfigurationSectionName(Protocol):
    """
    Supplies the name of the configuration section to load for an extension.
    The name may be empty.
    """

    @property
    def section_name(self) -> SectionName: ...


@runtime_checkable
class LoadsConfigurationSection(Protocol):
    """
    Loads configuration sections by name.

    Error Handling:
    - A missing section is returned as None, never raised.
    """

    def get_section(self, section_name: SectionName) -> Optional["ConfigurationSection"]: ...


@runtime_checkable
class ConsumesConfiguration(Protocol):
    """
    Holds the configuration map filled for an extension. The map may already
    hold defaults before the configuration section is copied into it.
    """

    @property
    def configuration(self) -> ConfigurationMap: ...


@runtime_checkable
class HasConversionCallbacks(Protocol):
    """
    Supplies conversion callbacks keyed by configuration key plus the default
    callback used for keys without a dedicated one.
    """

    @property
    def conversion_callbacks(self) -> ConversionCallbackMap: ...

    @property
    def default_conversion_callback(self) -> ConversionCallback: ...


@runtime_checkable
class ExtensionPropertyReflector(Protocol):
    """
    Returns the properties of an extension that configuration may be bound to.
    """

    def reflect(self, extension: Any) -> Iterable["PropertyDescriptor"]: ...
