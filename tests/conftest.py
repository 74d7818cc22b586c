# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict
from unittest.mock import MagicMock, PropertyMock

import pytest

from bootstrapper.configuration.collaborators import CollaboratorFactory


class FixedCollaboratorFactory(CollaboratorFactory):
    """
    Test double handing out the same mocked collaborators for every extension.
    Collaborators left as None fall back to the defaults.
    """

    def __init__(
        self,
        section_name_provider=None,
        section_provider=None,
        consumer=None,
        conversion_callbacks=None,
    ) -> None:
        super().__init__()
        self._section_name_provider = section_name_provider
        self._section_provider = section_provider
        self._consumer = consumer
        self._conversion_callbacks = conversion_callbacks

    def create_have_configuration_section_name(self, extension):
        if self._section_name_provider is None:
            return super().create_have_configuration_section_name(extension)
        return self._section_name_provider

    def create_load_configuration_section(self, extension):
        if self._section_provider is None:
            return super().create_load_configuration_section(extension)
        return self._section_provider

    def create_consume_configuration(self, extension):
        if self._consumer is None:
            return super().create_consume_configuration(extension)
        return self._consumer

    def create_have_conversion_callbacks(self, extension):
        if self._conversion_callbacks is None:
            return super().create_have_conversion_callbacks(extension)
        return self._conversion_callbacks


@pytest.fixture
def extensions():
    """Two unrelated extensions."""
    return [object(), object()]


@pytest.fixture
def configuration() -> Dict[str, str]:
    """The configuration map handed out by the consumer mock."""
    return {}


@pytest.fixture
def consumer(configuration):
    consumer = MagicMock()
    type(consumer).configuration = PropertyMock(return_value=configuration)
    return consumer


@pytest.fixture
def section_name_property():
    return PropertyMock(return_value="SectionName")


@pytest.fixture
def section_name_provider(section_name_property):
    provider = MagicMock()
    type(provider).section_name = section_name_property
    return provider


@pytest.fixture
def section_provider():
    provider = MagicMock()
    provider.get_section.return_value = None
    return provider


@pytest.fixture
def conversion_callbacks_property():
    return PropertyMock(return_value={})


@pytest.fixture
def default_callback_property():
    return PropertyMock(return_value=lambda value, descriptor: value)


@pytest.fixture
def conversion_callbacks(conversion_callbacks_property, default_callback_property):
    provider = MagicMock()
    type(provider).conversion_callbacks = conversion_callbacks_property
    type(provider).default_conversion_callback = default_callback_property
    return provider


@pytest.fixture
def reflector():
    reflector = MagicMock()
    reflector.reflect.return_value = []
    return reflector


@pytest.fixture
def behavior_factory(reflector, section_name_provider, section_provider, consumer, conversion_callbacks):
    """Returns a factory building the behavior with the mocked collaborators."""
    from bootstrapper.configuration.behavior import ExtensionConfigurationSectionBehavior

    def _factory(**overrides: Any):
        collaborators = {
            "section_name_provider": section_name_provider,
            "section_provider": section_provider,
            "consumer": consumer,
            "conversion_callbacks": conversion_callbacks,
        }
        collaborators.update(overrides)
        return ExtensionConfigurationSectionBehavior(
            reflector=reflector, factory=FixedCollaboratorFactory(**collaborators)
        )

    return _factory


@pytest.fixture
def testee(behavior_factory):
    return behavior_factory()
