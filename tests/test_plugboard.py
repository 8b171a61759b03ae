import pytest

from enigma_engine.alphabet import ALPHABET
from enigma_engine.errors import ConfigurationError
from enigma_engine.plugboard import (
    identity_mapping,
    mapping_from_connections,
    mapping_from_pairs,
    pairs_of,
    plugboard_lookup,
    validate_mapping,
)


def test_identity() -> None:
    assert identity_mapping() == ALPHABET
    assert pairs_of(identity_mapping()) == []


def test_mapping_from_pairs() -> None:
    mapping = mapping_from_pairs(["AZ", "by", ("C", "X")])
    assert mapping[0] == "Z"
    assert mapping[25] == "A"
    assert mapping[1] == "Y"
    assert mapping[2] == "X"
    assert mapping[3] == "D"
    assert pairs_of(mapping) == ["AZ", "BY", "CX"]
    validate_mapping(mapping, involutive=True)


@pytest.mark.parametrize(
    "pairs",
    [["AA"], ["AB", "BC"], ["A"], ["A1"], ["ABC"], ["ıZ"], ["Aſ"]],
)
def test_mapping_from_pairs_rejects(pairs: list[str]) -> None:
    with pytest.raises(ConfigurationError):
        mapping_from_pairs(pairs)


def test_mapping_from_connections() -> None:
    mapping = mapping_from_connections([("A", "Q"), ("m", "n")])
    assert plugboard_lookup(mapping, "A") == "Q"
    assert plugboard_lookup(mapping, "Q") == "A"
    assert plugboard_lookup(mapping, "N") == "M"
    assert plugboard_lookup(mapping, "B") == "B"


def test_conflicting_connections_last_wins() -> None:
    mapping = mapping_from_connections([("A", "B"), ("A", "C")])
    assert mapping[0] == "C"
    assert mapping[2] == "A"
    # B still points at A: no longer symmetric.
    assert mapping[1] == "A"
    with pytest.raises(ConfigurationError):
        validate_mapping(mapping)


def test_lookup_outside_alphabet() -> None:
    assert plugboard_lookup(ALPHABET, "a") is None
    assert plugboard_lookup(ALPHABET, "!") is None
    assert plugboard_lookup(ALPHABET, "") is None


def test_validate_mapping_involution() -> None:
    rotated = ALPHABET[1:] + ALPHABET[0]
    validate_mapping(rotated)
    with pytest.raises(ConfigurationError):
        validate_mapping(rotated, involutive=True)


def test_connections_reject_non_ascii() -> None:
    with pytest.raises(ConfigurationError):
        mapping_from_connections([("ı", "Z")])
