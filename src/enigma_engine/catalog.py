"""enigma_engine.catalog.

Historical rotor and reflector tables.

These are process-wide constants shared by every :class:`~enigma_engine.machine.Machine`.
They are frozen dataclasses stored in tuples, so nothing can mutate them and no
synchronization is needed when several machines use the same entries.

Selectors follow the firmware numbering:

- rotors are selected with 1..8 (I..VIII),
- reflectors are selected with 0..2 (A, B, C).

Each rotor carries two letter sets:

- ``notch``: the position at which the rotor engages the next rotor's pawl.
  The double-step check compares a rotor's *current* position against it.
- ``turnover``: the letter *after* the notch. When a rotor steps onto one of
  these letters it flags that the next rotor must advance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .alphabet import ALPHABET, Permutation, upper_ascii
from .errors import ConfigurationError

ROTOR_SELECTOR_MIN: Final[int] = 1
ROTOR_SELECTOR_MAX: Final[int] = 8
REFLECTOR_SELECTOR_MIN: Final[int] = 0
REFLECTOR_SELECTOR_MAX: Final[int] = 2


@dataclass(frozen=True)
class RotorType:
    """Immutable description of one catalog rotor.

    Attributes:
        name:
            Roman numeral label ("I" .. "VIII").
        wiring:
            Validated permutation of the alphabet.
        notch:
            Letters at which the double-step pawl engages.
        turnover:
            Letters whose arrival triggers the next rotor to step.

    """

    name: str
    wiring: Permutation
    notch: str
    turnover: str

    def __post_init__(self) -> None:
        """Reject non-permutation wiring and empty or non A-Z notch sets."""
        if not self.wiring.is_bijective():
            raise ConfigurationError(f"Rotor {self.name} wiring is not a permutation.")
        for label, letters in (("notch", self.notch), ("turnover", self.turnover)):
            if not letters or any(ch not in ALPHABET for ch in letters):
                raise ConfigurationError(f"Rotor {self.name} has an invalid {label} set.")


@dataclass(frozen=True)
class ReflectorType:
    """Immutable reflector table; must be an involution without fixed points."""

    name: str
    wiring: Permutation

    def __post_init__(self) -> None:
        """Reject wiring that is not a fixed-point-free involution."""
        if not self.wiring.is_involution() or self.wiring.fixed_points():
            raise ConfigurationError(
                f"Reflector {self.name} must be an involution with no fixed points."
            )


ROTOR_TYPES: Final[tuple[RotorType, ...]] = (
    RotorType("I", Permutation("EKMFLGDQVZNTOWYHXUSPAIBRCJ"), "Q", "R"),
    RotorType("II", Permutation("AJDKSIRUXBLHWTMCQGZNPYFVOE"), "E", "F"),
    RotorType("III", Permutation("BDFHJLCPRTXVZNYEIWGAKMUSQO"), "V", "W"),
    RotorType("IV", Permutation("ESOVPZJAYQUIRHXLNFTGKDCMWB"), "J", "K"),
    RotorType("V", Permutation("VZBRGITYUPSDNHLXAWMJQOFECK"), "Z", "A"),
    RotorType("VI", Permutation("JPGVOUMFYQBENHZRDKASXLICTW"), "ZM", "AN"),
    RotorType("VII", Permutation("NZJHGRCXMYSWBOUFAIVLPEKQDT"), "ZM", "AN"),
    RotorType("VIII", Permutation("FKQHTLXOCBJSPDZRAMEWNIUYGV"), "ZM", "AN"),
)

REFLECTOR_TYPES: Final[tuple[ReflectorType, ...]] = (
    ReflectorType("A", Permutation("EJMZALYXVBWFCRQUONTSPIKHGD")),
    ReflectorType("B", Permutation("YRUHQSLDPXNGOKMIEBFZCWVJAT")),
    ReflectorType("C", Permutation("FVPJIAOYEDRZXWGCTKUQSBNMHL")),
)

ROTORS_BY_NAME: Final[dict[str, int]] = {
    r.name: i + ROTOR_SELECTOR_MIN for i, r in enumerate(ROTOR_TYPES)
}
REFLECTORS_BY_NAME: Final[dict[str, int]] = {
    r.name: i + REFLECTOR_SELECTOR_MIN for i, r in enumerate(REFLECTOR_TYPES)
}


def rotor_type(selector: int) -> RotorType:
    """Return the catalog rotor for a 1-based selector.

    Raises:
        ConfigurationError: If ``selector`` is outside 1..8.

    """
    if not ROTOR_SELECTOR_MIN <= selector <= ROTOR_SELECTOR_MAX:
        raise ConfigurationError(
            f"Rotor selector {selector} out of range "
            f"{ROTOR_SELECTOR_MIN}..{ROTOR_SELECTOR_MAX}."
        )
    return ROTOR_TYPES[selector - ROTOR_SELECTOR_MIN]


def reflector_type(selector: int) -> ReflectorType:
    """Return the catalog reflector for a 0-based selector.

    Raises:
        ConfigurationError: If ``selector`` is outside 0..2.

    """
    if not REFLECTOR_SELECTOR_MIN <= selector <= REFLECTOR_SELECTOR_MAX:
        raise ConfigurationError(
            f"Reflector selector {selector} out of range "
            f"{REFLECTOR_SELECTOR_MIN}..{REFLECTOR_SELECTOR_MAX}."
        )
    return REFLECTOR_TYPES[selector - REFLECTOR_SELECTOR_MIN]


def parse_rotor_selector(token: str) -> int:
    """Parse a rotor token given as a Roman numeral ("III") or digit ("3")."""
    t = upper_ascii(token.strip())
    if t in ROTORS_BY_NAME:
        return ROTORS_BY_NAME[t]
    try:
        selector = int(t, 10)
    except ValueError as exc:
        raise ConfigurationError(f"Unknown rotor: {token!r}") from exc
    rotor_type(selector)
    return selector


def parse_reflector_selector(token: str) -> int:
    """Parse a reflector token given as a letter ("B") or selector digit ("1")."""
    t = upper_ascii(token.strip())
    if t in REFLECTORS_BY_NAME:
        return REFLECTORS_BY_NAME[t]
    try:
        selector = int(t, 10)
    except ValueError as exc:
        raise ConfigurationError(f"Unknown reflector: {token!r}") from exc
    reflector_type(selector)
    return selector
