import pytest

from enigma_engine.alphabet import Permutation
from enigma_engine.catalog import (
    REFLECTOR_TYPES,
    ROTOR_TYPES,
    ReflectorType,
    RotorType,
    parse_reflector_selector,
    parse_rotor_selector,
    reflector_type,
    rotor_type,
)
from enigma_engine.errors import ConfigurationError


def test_catalog_sizes() -> None:
    assert len(ROTOR_TYPES) == 8
    assert len(REFLECTOR_TYPES) == 3
    assert rotor_type(1).name == "I"
    assert rotor_type(8).name == "VIII"
    assert reflector_type(1).name == "B"


@pytest.mark.parametrize("selector", [0, 9, -1])
def test_rotor_selector_out_of_range(selector: int) -> None:
    with pytest.raises(ConfigurationError):
        rotor_type(selector)


@pytest.mark.parametrize("selector", [-1, 3])
def test_reflector_selector_out_of_range(selector: int) -> None:
    with pytest.raises(ConfigurationError):
        reflector_type(selector)


def test_reflectors_have_no_fixed_points() -> None:
    for refl in REFLECTOR_TYPES:
        assert refl.wiring.is_involution()
        assert refl.wiring.fixed_points() == []


def test_turnover_follows_notch() -> None:
    for r in ROTOR_TYPES:
        assert len(r.notch) == len(r.turnover)
        for n, t in zip(r.notch, r.turnover, strict=True):
            assert (ord(n) - 65 + 1) % 26 == ord(t) - 65


def test_parse_selectors() -> None:
    assert parse_rotor_selector("iii") == 3
    assert parse_rotor_selector(" 7 ") == 7
    assert parse_reflector_selector("c") == 2
    assert parse_reflector_selector("0") == 0
    with pytest.raises(ConfigurationError):
        parse_rotor_selector("IX")
    with pytest.raises(ConfigurationError):
        parse_rotor_selector("9")
    with pytest.raises(ConfigurationError):
        parse_reflector_selector("D")
    with pytest.raises(ConfigurationError):
        parse_rotor_selector("ıı")


def test_malformed_tables_rejected() -> None:
    with pytest.raises(ConfigurationError):
        RotorType("X", Permutation("A" * 26), "Q", "R")
    with pytest.raises(ConfigurationError):
        RotorType("X", Permutation("EKMFLGDQVZNTOWYHXUSPAIBRCJ"), "", "R")
    with pytest.raises(ConfigurationError):
        ReflectorType("X", Permutation("ABCDEFGHIJKLMNOPQRSTUVWXYZ"))
