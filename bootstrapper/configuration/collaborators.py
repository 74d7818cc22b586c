# bootstrapper/configuration/collaborators.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Optional

from bootstrapper.configuration.conversion import default_conversion
from bootstrapper.configuration.section import ConfigurationSection
from bootstrapper.configuration.store import SectionStore
from bootstrapper.interfaces.protocols import (
    ConsumesConfiguration,
    HasConfigurationSectionName,
    HasConversionCallbacks,
    LoadsConfigurationSection,
)
from bootstrapper.interfaces.types import ConfigurationMap, ConversionCallback, ConversionCallbackMap, SectionName


class HaveConfigurationSectionName:
    """
    Section name of an extension: the extension's own section_name when it
    provides one, otherwise the name of its class.
    """

    def __init__(self, extension: Any) -> None:
        self._extension = extension

    @property
    def section_name(self) -> SectionName:
        if isinstance(self._extension, HasConfigurationSectionName):
            return self._extension.section_name
        return type(self._extension).__name__


class LoadConfigurationSection:
    """
    Loads sections through the extension when it implements
    LoadsConfigurationSection, otherwise from the section store.
    """

    def __init__(self, extension: Any, store: SectionStore) -> None:
        self._extension = extension
        self._store = store

    def get_section(self, section_name: SectionName) -> Optional[ConfigurationSection]:
        if isinstance(self._extension, LoadsConfigurationSection):
            return self._extension.get_section(section_name)
        return self._store.get_section(section_name)


class ConsumeConfiguration:
    """
    Configuration map of an extension: the extension's own map when it
    implements ConsumesConfiguration, otherwise a fresh, private dict.
    """

    def __init__(self, extension: Any) -> None:
        self._extension = extension
        self._configuration: ConfigurationMap = {}

    @property
    def configuration(self) -> ConfigurationMap:
        if isinstance(self._extension, ConsumesConfiguration):
            return self._extension.configuration
        return self._configuration


class HaveConversionCallbacks:
    """
    Conversion callbacks of an extension. Extensions without their own
    callbacks get an empty map and default_conversion.
    """

    def __init__(self, extension: Any) -> None:
        self._extension = extension
        self._callbacks: ConversionCallbackMap = {}

    @property
    def conversion_callbacks(self) -> ConversionCallbackMap:
        if isinstance(self._extension, HasConversionCallbacks):
            return self._extension.conversion_callbacks
        return self._callbacks

    @property
    def default_conversion_callback(self) -> ConversionCallback:
        if isinstance(self._extension, HasConversionCallbacks):
            return self._extension.default_conversion_callback
        return default_conversion


class CollaboratorFactory:
    """
    Creates the per-extension collaborators used by the configuration section
    behavior. Subclass and override the create methods to customize how a
    collaborator is obtained for a given extension.
    """

    def __init__(self, store: Optional[SectionStore] = None) -> None:
        """
        :param store: Sections used by the default section loader. An empty
            store is used when omitted.
        """
        self.store = store if store is not None else SectionStore()

    def create_have_configuration_section_name(self, extension: Any) -> HasConfigurationSectionName:
        return HaveConfigurationSectionName(extension)

    def create_load_configuration_section(self, extension: Any) -> LoadsConfigurationSection:
        return LoadConfigurationSection(extension, self.store)

    def create_consume_configuration(self, extension: Any) -> ConsumesConfiguration:
        return ConsumeConfiguration(extension)

    def create_have_conversion_callbacks(self, extension: Any) -> HasConversionCallbacks:
        return HaveConversionCallbacks(extension)
