# tests/unit/configuration/test_store.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import logging

import pytest

from bootstrapper.configuration.store import SectionStore
from bootstrapper.core.errors import ArgumentNullError


@pytest.fixture
def store() -> SectionStore:
    return SectionStore.from_mapping(
        {
            "MailExtension": {"Host": "localhost", "Port": "25"},
            "Empty": {},
        }
    )


def test_get_registered_section(store):
    section = store.get_section("MailExtension")

    assert section.to_dict() == {"Host": "localhost", "Port": "25"}


def test_get_unknown_section_returns_none(store):
    assert store.get_section("Unknown") is None


def test_section_names_are_case_sensitive(store):
    assert store.get_section("mailextension") is None


def test_names_and_membership(store):
    assert store.names() == ["MailExtension", "Empty"]
    assert "Empty" in store
    assert len(store) == 2


def test_register_replaces_section(store, caplog):
    with caplog.at_level(logging.DEBUG, logger="bootstrapper.configuration.store"):
        store.register("MailExtension", {"Host": "smtp.example.org"})

    assert store.get_section("MailExtension").to_dict() == {"Host": "smtp.example.org"}
    assert "Replacing configuration section 'MailExtension'" in caplog.text


def test_register_rejects_none():
    store = SectionStore()

    with pytest.raises(ArgumentNullError):
        store.register(None, {})  # type: ignore

    with pytest.raises(ArgumentNullError):
        store.register("Name", None)  # type: ignore
