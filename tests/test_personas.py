"""
Tests for the persona table.
"""

from __future__ import annotations

import pytest

from alina.personas import PERSONAS, UnknownPersonaError, get_persona, list_personas


def test_default_persona():
    assert get_persona().key == "alina"
    assert get_persona("").key == "alina"


def test_lookup_is_case_insensitive():
    assert get_persona(" Technical ").name == "Tech Expert"


def test_unknown_persona():
    with pytest.raises(UnknownPersonaError):
        get_persona("pirate")


def test_table_is_read_only():
    with pytest.raises(TypeError):
        PERSONAS["pirate"] = PERSONAS["alina"]


def test_list_order_and_content():
    keys = [p.key for p in list_personas()]
    assert keys[:2] == ["prashant", "alina"]
    assert len(keys) == 8
    for persona in list_personas():
        assert persona.model
        assert persona.system_prompt
        assert 0.0 <= persona.temperature <= 1.0
