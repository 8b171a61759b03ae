"""enigma_engine.plugboard.

Plugboard (Steckerbrett) mapping helpers.

The machine stores the plugboard as a 26-letter mapping string in which a
self-mapped letter means "no cable". This module builds such strings for the
collaborators that feed the machine:

- `mapping_from_pairs`: operator-style cable pairs ("AZ", "BY", ...).
- `mapping_from_connections`: the result of a physical scan, given as the
  list of detected links in scan order.

Contract
- The machine itself does not require the mapping to be a permutation. A
  mapping that is not an involution silently breaks self-reciprocity.
  `validate_mapping` is the opt-in defensive check.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .alphabet import ALPHABET, Permutation, index_of, is_letter
from .errors import ConfigurationError


def identity_mapping() -> str:
    """Return the mapping with no cables plugged."""
    return ALPHABET


def mapping_from_pairs(pairs: Iterable[str | Sequence[str]]) -> str:
    """Build a mapping from cable pairs.

    Args:
        pairs:
            Two-letter strings ("AZ") or 2-item sequences (("A", "Z")).
            Case is ignored.

    Returns:
        26-letter involutive mapping string.

    Raises:
        ConfigurationError: If a pair is malformed, maps a letter to itself,
            or reuses a letter already plugged.

    """
    table = list(ALPHABET)
    used: set[str] = set()

    for raw in pairs:
        if len(raw) != 2:
            raise ConfigurationError(f"Plug pair {raw!r} must be exactly 2 letters.")
        a, b = (str(x) for x in raw)
        if not (is_letter(a) and is_letter(b)):
            raise ConfigurationError(f"Plug pair {raw!r} must contain letters A-Z.")
        a, b = a.upper(), b.upper()

        if a == b:
            raise ConfigurationError(f"Plugboard cannot connect a letter to itself: {a}")
        if a in used or b in used:
            dup = a if a in used else b
            raise ConfigurationError(f"Letter {dup!r} is already plugged.")

        table[index_of(a)], table[index_of(b)] = b, a
        used.update((a, b))

    return "".join(table)


def mapping_from_connections(connections: Iterable[tuple[str, str]]) -> str:
    """Build a mapping from scanned links, later links winning.

    A scan drives each contact in turn and records the first other contact
    that reads high. Both ends of a link are written, so a later link that
    shares a letter overwrites the earlier one; the result may then not be an
    involution. Letters with no link map to themselves.

    Raises:
        ConfigurationError: If a link names something outside A–Z.

    """
    table = list(ALPHABET)
    for a, b in connections:
        if not (is_letter(a) and is_letter(b)):
            raise ConfigurationError(f"Invalid plugboard link: {a!r}-{b!r}")
        a, b = a.upper(), b.upper()
        table[index_of(a)] = b
        table[index_of(b)] = a
    return "".join(table)


def plugboard_lookup(mapping: str, letter: str) -> str | None:
    """Return the plugboard image of ``letter``, or None outside A–Z."""
    if len(letter) != 1 or not ("A" <= letter <= "Z"):
        return None
    return mapping[index_of(letter)]


def validate_mapping(mapping: str, *, involutive: bool = False) -> Permutation:
    """Check that ``mapping`` is a real permutation (and optionally an involution).

    Returns:
        The validated :class:`~enigma_engine.alphabet.Permutation`.

    Raises:
        ConfigurationError: On a malformed or non-bijective mapping, or a
            non-involutive one when ``involutive`` is set.

    """
    perm = Permutation.checked(mapping)
    if involutive and not perm.is_involution():
        raise ConfigurationError(f"Plugboard mapping {mapping!r} is not symmetric.")
    return perm


def pairs_of(mapping: str) -> list[str]:
    """List the cable pairs of an involutive mapping, e.g. ``["AZ", "BY"]``."""
    out: list[str] = []
    for i, ch in enumerate(mapping):
        a = ALPHABET[i]
        if a < ch and mapping[index_of(ch)] == a:
            out.append(a + ch)
    return out
