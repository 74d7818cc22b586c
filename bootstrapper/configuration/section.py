# bootstrapper/configuration/section.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Tuple


@dataclass(frozen=True)
class SettingsElement:
    """A single key/value entry of a configuration section."""

    key: str
    value: str


@dataclass(frozen=True)
class ConfigurationSection:
    """
    Immutable, ordered sequence of key/value settings belonging to one
    extension. An absent section is represented by an empty one.
    """

    configuration: Tuple[SettingsElement, ...] = ()

    def __iter__(self) -> Iterator[SettingsElement]:
        return iter(self.configuration)

    def __len__(self) -> int:
        return len(self.configuration)

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over (key, value) pairs in section order."""
        for element in self.configuration:
            yield element.key, element.value

    def to_dict(self) -> Dict[str, str]:
        return dict(self.items())

    @classmethod
    def empty(cls) -> "ConfigurationSection":
        return cls()


def create_section(configuration: Mapping[str, str]) -> ConfigurationSection:
    """
    Build a section from a mapping, keeping the mapping's iteration order.

    :param configuration: Key/value pairs of the section.
    :return: A new ConfigurationSection.
    """
    return ConfigurationSection(tuple(SettingsElement(str(key), str(value)) for key, value in configuration.items()))
