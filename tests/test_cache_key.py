"""Tests for content-addressable cache key derivation."""

import re

import pytest

from garden_care.modules.plant_care.domain.models.cache_entry import CacheContext
from garden_care.modules.plant_care.domain.models.care_profile import PlantedIn
from garden_care.modules.plant_care.domain.models.plant import GenerationContext
from garden_care.modules.plant_care.domain.services.cache_key import derive_cache_key
from garden_care.shared.core.exceptions import ValidationError

BASE = ("Climbing Rose", "ground", 8, 1)


def test_key_is_sha256_hex():
    key = derive_cache_key(*BASE)
    assert re.fullmatch(r"[0-9a-f]{64}", key)


def test_key_is_deterministic():
    assert derive_cache_key(*BASE) == derive_cache_key(*BASE)


@pytest.mark.parametrize(
    "changed",
    [
        ("Shrub Rose", "ground", 8, 1),
        ("Climbing Rose", "pot", 8, 1),
        ("Climbing Rose", None, 8, 1),
        ("Climbing Rose", "ground", 9, 1),
        ("Climbing Rose", "ground", None, 1),
        ("Climbing Rose", "ground", 8, 2),
    ],
)
def test_changing_any_component_changes_key(changed):
    assert derive_cache_key(*changed) != derive_cache_key(*BASE)


def test_name_is_case_and_whitespace_insensitive():
    assert derive_cache_key("  climbing ROSE ", "ground", 8, 1) == derive_cache_key(*BASE)


def test_enum_and_string_planted_in_agree():
    assert derive_cache_key("Rose", PlantedIn.RAISED_BED, 8, 1) == derive_cache_key("Rose", "raised_bed", 8, 1)


def test_default_zone_differs_from_explicit_zone_8():
    assert derive_cache_key("Rose", None, None, 1) != derive_cache_key("Rose", None, 8, 1)


@pytest.mark.parametrize("planted_in", ["unspecified", "Unspecified", ""])
def test_unspecified_planted_in_matches_missing_value(planted_in):
    assert derive_cache_key("Rose", planted_in, 8, 1) == derive_cache_key("Rose", None, 8, 1)


def test_default_zone_literal_matches_missing_zone():
    assert derive_cache_key("Rose", "pot", "default", 1) == derive_cache_key("Rose", "pot", None, 1)


def test_generation_context_accepts_unspecified_members():
    context = GenerationContext.model_validate({"planted_in": "unspecified", "climate_zone": "default"})

    assert context.planted_in is None
    assert context.climate_zone is None


def test_delimiter_in_name_cannot_collide():
    assert derive_cache_key("a|pot", None, None, 1) != derive_cache_key("a", "pot", None, 1)


def test_schema_version_bump_orphans_old_key():
    old_key = derive_cache_key("Lavender", "pot", 9, 1)
    new_key = derive_cache_key("Lavender", "pot", 9, 2)
    assert old_key != new_key
    assert derive_cache_key("Lavender", "pot", 9, 1) == old_key


@pytest.mark.parametrize(
    "args",
    [
        ("", "ground", 8, 1),
        ("   ", "ground", 8, 1),
        ("Rose", "window_box", 8, 1),
        ("Rose", "ground", 6, 1),
        ("Rose", "ground", 11, 1),
        ("Rose", "ground", True, 1),
        ("Rose", "ground", 8, 0),
    ],
)
def test_invalid_inputs_rejected(args):
    with pytest.raises(ValidationError):
        derive_cache_key(*args)


def test_cache_context_key_matches_function():
    context = CacheContext(normalized_name="Rose", planted_in="pot", climate_zone=9, schema_version=3)
    assert context.cache_key == derive_cache_key("Rose", "pot", 9, 3)
