# bootstrapper/configuration/store.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import logging
from typing import Dict, List, Mapping, Optional

from bootstrapper.configuration.section import ConfigurationSection, create_section
from bootstrapper.core.errors import ensure_argument_not_null
from bootstrapper.interfaces.types import SectionName

logger = logging.getLogger(__name__)


class SectionStore:
    """
    In-memory registry of configuration sections addressed by name. The host
    fills it from whatever configuration source it uses; the store itself does
    not parse any storage format.
    """

    def __init__(self) -> None:
        self._sections: Dict[SectionName, ConfigurationSection] = {}

    @classmethod
    def from_mapping(cls, sections: Mapping[SectionName, Mapping[str, str]]) -> "SectionStore":
        """
        Create a store from a nested mapping of section name to key/value pairs.

        Example:
            store = SectionStore.from_mapping({"MailExtension": {"Host": "localhost"}})
        """
        store = cls()
        for name, configuration in sections.items():
            store.register(name, configuration)
        return store

    def register(self, section_name: SectionName, configuration: Mapping[str, str]) -> ConfigurationSection:
        """
        Register (or replace) the section stored under a name.

        :param section_name: The section name.
        :param configuration: Key/value pairs of the section.
        :return: The stored section.
        """
        ensure_argument_not_null(section_name, "section_name")
        ensure_argument_not_null(configuration, "configuration")

        section = create_section(configuration)
        if section_name in self._sections:
            logger.debug("Replacing configuration section '%s'", section_name)
        self._sections[section_name] = section
        return section

    def get_section(self, section_name: SectionName) -> Optional[ConfigurationSection]:
        """Return the section stored under the name, or None if there is none."""
        return self._sections.get(section_name)

    def names(self) -> List[SectionName]:
        return list(self._sections)

    def __contains__(self, section_name: object) -> bool:
        return section_name in self._sections

    def __len__(self) -> int:
        return len(self._sections)
