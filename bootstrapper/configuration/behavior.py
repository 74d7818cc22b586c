# bootstrapper/configuration/behavior.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from bootstrapper.configuration.collaborators import CollaboratorFactory
from bootstrapper.configuration.reflection import ExtensionPublicPropertyReflector, PropertyDescriptor
from bootstrapper.configuration.section import ConfigurationSection, create_section
from bootstrapper.core.behavior import Behavior
from bootstrapper.core.errors import AmbiguousPropertyMatchError, ensure_argument_not_null
from bootstrapper.interfaces.protocols import (
    ConsumesConfiguration,
    ExtensionPropertyReflector,
    HasConversionCallbacks,
)

logger = logging.getLogger(__name__)


class ExtensionConfigurationSectionBehavior(Behavior[Any]):
    """
    Behavior which loads the configuration section of every extension and
    binds the entries onto the extension's properties.

    Per extension, in order: the section name is resolved, the section is
    loaded (a missing section counts as empty), its entries are copied into
    the extension's configuration map and every entry whose key names exactly
    one property (case-insensitive) is converted and assigned. Keys matching
    no property are ignored. Errors abort the pass; extensions bound before
    the failure stay bound.
    """

    def __init__(
        self,
        reflector: Optional[ExtensionPropertyReflector] = None,
        factory: Optional[CollaboratorFactory] = None,
    ) -> None:
        """
        :param reflector: Supplies bindable properties. Defaults to
            ExtensionPublicPropertyReflector.
        :param factory: Creates the per-extension collaborators. Defaults to a
            CollaboratorFactory over an empty section store.
        """
        self._reflector = reflector if reflector is not None else ExtensionPublicPropertyReflector()
        self._factory = factory if factory is not None else CollaboratorFactory()

    def behave(self, extensions: Iterable[Any]) -> None:
        """
        Apply configuration section loading to the extensions.

        :param extensions: The extensions.
        :raises ArgumentNullError: If extensions is None.
        :raises AmbiguousPropertyMatchError: If a key matches several properties.
        """
        ensure_argument_not_null(extensions, "extensions")

        count = 0
        for extension in extensions:
            self._configure(extension)
            count += 1

        logger.info("Configured %d extension(s) from configuration sections", count)

    def _configure(self, extension: Any) -> None:
        section_name_provider = self._factory.create_have_configuration_section_name(extension)
        section_provider = self._factory.create_load_configuration_section(extension)
        consumer = self._factory.create_consume_configuration(extension)
        callback_provider = self._factory.create_have_conversion_callbacks(extension)

        section_name = section_name_provider.section_name
        section = _as_section(section_provider.get_section(section_name), section_name)
        logger.debug("Loaded section '%s' with %d entries for %r", section_name, len(section), extension)

        _fill_consumer_configuration(section, consumer)
        self._bind_properties(extension, consumer, callback_provider)

    def _bind_properties(
        self, extension: Any, consumer: ConsumesConfiguration, callback_provider: HasConversionCallbacks
    ) -> None:
        properties = list(self._reflector.reflect(extension))
        conversion_callbacks = callback_provider.conversion_callbacks
        default_callback = callback_provider.default_conversion_callback

        for key, value in consumer.configuration.items():
            matched = _match_property(properties, key, extension)
            if matched is None:
                logger.debug("No property of %s matches configuration key '%s'", type(extension).__name__, key)
                continue

            callback = conversion_callbacks.get(key, default_callback)
            matched.set_value(extension, callback(value, matched))
            logger.debug("Bound configuration key '%s' to %s.%s", key, type(extension).__name__, matched.name)


def _as_section(loaded: Any, section_name: str) -> ConfigurationSection:
    if loaded is None:
        return ConfigurationSection.empty()
    if isinstance(loaded, ConfigurationSection):
        return loaded
    if isinstance(loaded, Mapping):
        return create_section(loaded)

    logger.warning(
        "Section '%s' is a %s, not a configuration section; treating it as empty",
        section_name,
        type(loaded).__name__,
    )
    return ConfigurationSection.empty()


def _fill_consumer_configuration(section: ConfigurationSection, consumer: ConsumesConfiguration) -> None:
    configuration = consumer.configuration
    for element in section:
        configuration[element.key] = element.value


def _match_property(properties: List[PropertyDescriptor], key: str, extension: Any) -> Optional[PropertyDescriptor]:
    wanted = key.casefold()
    matches = [prop for prop in properties if prop.name.casefold() == wanted]

    if len(matches) > 1:
        raise AmbiguousPropertyMatchError(key, extension, [prop.name for prop in matches])
    return matches[0] if matches else None
