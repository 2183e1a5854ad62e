"""Tests for value-object limit validation and settings resolution."""

from __future__ import annotations

from dataclasses import replace

import pytest

from campus.domain.constraints import ValueObjectLimits, validate_value_object_limits
from campus.utils.config import get_settings


def valid_limits(**overrides) -> ValueObjectLimits:
    """Return the default limits, optionally overriding fields."""
    return replace(ValueObjectLimits(), **overrides)


# --- Baseline pass ---

def test_default_limits_pass() -> None:
    validate_value_object_limits(valid_limits())


def test_default_limits_match_documented_lengths() -> None:
    limits = ValueObjectLimits()
    assert limits.room_name_max_length == 50
    assert limits.room_description_max_length == 250
    assert limits.building_code_max_length == 5
    assert limits.building_name_max_length == 50
    assert limits.building_description_max_length == 255
    assert limits.floor_description_max_length == 250


@pytest.mark.parametrize(
    "field_name",
    [
        "room_name_max_length",
        "room_description_max_length",
        "building_code_max_length",
        "building_name_max_length",
        "building_description_max_length",
        "floor_description_max_length",
    ],
)
def test_limit_below_one_raises(field_name: str) -> None:
    with pytest.raises(ValueError, match=field_name):
        validate_value_object_limits(valid_limits(**{field_name: 0}))


# --- Settings ---

def test_settings_read_limits_and_strategy_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ROOM_NAME_MAX_LENGTH", "12")
    monkeypatch.setenv("ROOM_OVERLAP_STRATEGY", "Intersection")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.room_name_max_length == 12
        assert settings.room_overlap_strategy == "intersection"
        assert settings.value_object_limits().room_name_max_length == 12
    finally:
        get_settings.cache_clear()


def test_settings_reject_unknown_overlap_strategy(monkeypatch) -> None:
    monkeypatch.setenv("ROOM_OVERLAP_STRATEGY", "diagonal")
    get_settings.cache_clear()
    try:
        with pytest.raises(ValueError, match="ROOM_OVERLAP_STRATEGY"):
            get_settings()
    finally:
        get_settings.cache_clear()


def test_settings_reject_non_integer_limit(monkeypatch) -> None:
    monkeypatch.setenv("ROOM_DESCRIPTION_MAX_LENGTH", "long")
    get_settings.cache_clear()
    try:
        with pytest.raises(ValueError, match="ROOM_DESCRIPTION_MAX_LENGTH"):
            get_settings()
    finally:
        get_settings.cache_clear()


def test_value_object_limits_rejects_zero_limit(settings) -> None:
    with pytest.raises(ValueError):
        replace(settings, floor_description_max_length=0).value_object_limits()
