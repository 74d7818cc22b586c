# bootstrapper/configuration/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from bootstrapper.configuration.behavior import ExtensionConfigurationSectionBehavior
from bootstrapper.configuration.collaborators import (
    CollaboratorFactory,
    ConsumeConfiguration,
    HaveConfigurationSectionName,
    HaveConversionCallbacks,
    LoadConfigurationSection,
)
from bootstrapper.configuration.conversion import default_conversion
from bootstrapper.configuration.reflection import ExtensionPublicPropertyReflector, PropertyDescriptor
from bootstrapper.configuration.section import ConfigurationSection, SettingsElement, create_section
from bootstrapper.configuration.store import SectionStore

__all__ = [
    "CollaboratorFactory",
    "ConfigurationSection",
    "ConsumeConfiguration",
    "ExtensionConfigurationSectionBehavior",
    "ExtensionPublicPropertyReflector",
    "HaveConfigurationSectionName",
    "HaveConversionCallbacks",
    "LoadConfigurationSection",
    "PropertyDescriptor",
    "SectionStore",
    "SettingsElement",
    "create_section",
    "default_conversion",
]
