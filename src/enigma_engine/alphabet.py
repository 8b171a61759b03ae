"""enigma_engine.alphabet.

Alphabet and permutation helpers shared by every stage of the machine.

The engine works on the 26-letter Latin alphabet. Internally a letter is its
index (A=0 .. Z=25); every substitution table is a 26-character string where
position ``i`` holds the letter that ``ALPHABET[i]`` maps to.

Lookups go through a precomputed dict rather than scanning the alphabet.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from .errors import ConfigurationError

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE: Final[int] = len(ALPHABET)

_INDEX: Final[dict[str, int]] = {ch: i for i, ch in enumerate(ALPHABET)}
_AZ_RE = re.compile(r"[^A-Za-z]")


def index_of(letter: str) -> int:
    """Return the alphabet index of an uppercase letter.

    Raises:
        KeyError: If ``letter`` is not one of A–Z.

    """
    return _INDEX[letter]


def letter_at(index: int) -> str:
    """Return the letter at ``index`` (taken modulo 26)."""
    return ALPHABET[index % SIZE]


def is_letter(ch: str) -> bool:
    """Return True for ASCII letters in either case.

    Characters such as "ı" (dotless i) or "ſ" (long s) uppercase to A–Z but
    are not ASCII, so they are rejected.

    Args:
        ch: Character to test.

    Returns:
        True if ``ch`` is one of a–z or A–Z.

    """
    return ch.isascii() and ch.upper() in _INDEX


def upper_ascii(text: str) -> str:
    """Uppercase ASCII text, refusing anything that only looks like A–Z.

    Args:
        text: Table, token or letter supplied by a caller.

    Returns:
        ``text.upper()``.

    Raises:
        ConfigurationError: If ``text`` contains non-ASCII characters.

    """
    if not text.isascii():
        raise ConfigurationError(f"{text!r} contains non-ASCII characters.")
    return text.upper()


def sanitize_text(text: str) -> str:
    """Normalize text into the supported alphabet.

    Any character outside ASCII a–z / A–Z is removed before uppercasing.

    Args:
        text: Arbitrary input text.

    Returns:
        Uppercased string containing only A–Z characters.

    """
    return _AZ_RE.sub("", text).upper()


@dataclass(frozen=True)
class Permutation:
    """A fixed-size substitution table over the alphabet.

    The table is stored as a 26-letter uppercase string. Construction checks
    the shape (length and letters) only; permutation-ness is a separate,
    explicit check because the plugboard contract trusts its caller.

    Attributes:
        wiring:
            26 uppercase letters; ``wiring[i]`` is the image of ``ALPHABET[i]``.

    """

    wiring: str

    def __post_init__(self) -> None:
        """Reject tables of the wrong length or with symbols outside A–Z."""
        if len(self.wiring) != SIZE:
            raise ConfigurationError(
                f"Substitution table must have {SIZE} letters, got {len(self.wiring)}."
            )
        bad = [ch for ch in self.wiring if ch not in _INDEX]
        if bad:
            raise ConfigurationError(f"Substitution table contains non A-Z symbols: {bad!r}")

    @classmethod
    def identity(cls) -> Permutation:
        """Return the table mapping every letter to itself."""
        return cls(ALPHABET)

    @classmethod
    def checked(cls, wiring: str) -> Permutation:
        """Build a table and require it to be a true permutation.

        Args:
            wiring: 26 letters, either case.

        Returns:
            The validated table.

        Raises:
            ConfigurationError: If the shape is wrong, the text is not ASCII or
                a letter repeats.

        """
        perm = cls(upper_ascii(wiring))
        if not perm.is_bijective():
            raise ConfigurationError(f"{wiring!r} is not a permutation of the alphabet.")
        return perm

    def __getitem__(self, index: int) -> str:
        """Return the letter at position ``index``."""
        return self.wiring[index]

    def __str__(self) -> str:
        """Return the table as its 26-letter string."""
        return self.wiring

    def image(self, index: int) -> int:
        """Return the index of the letter that position ``index`` maps to."""
        return _INDEX[self.wiring[index]]

    def is_bijective(self) -> bool:
        """Report whether every letter appears exactly once."""
        return len(set(self.wiring)) == SIZE

    def is_involution(self) -> bool:
        """Report whether applying the table twice gives the identity.

        Only meaningful for bijective tables; a repeated letter makes this
        False for at least one position.

        Returns:
            True if ``image(image(i)) == i`` for every index.

        """
        return all(self.image(self.image(i)) == i for i in range(SIZE))

    def fixed_points(self) -> list[str]:
        """List the letters that map to themselves, in alphabet order."""
        return [ALPHABET[i] for i in range(SIZE) if self.image(i) == i]

    def inverse_table(self) -> list[int]:
        """Return the inverse as an index table.

        Returns:
            List ``inv`` with ``inv[image(i)] == i`` for every index.

        Raises:
            ConfigurationError: If the table is not bijective.

        """
        if not self.is_bijective():
            raise ConfigurationError(f"{self.wiring!r} has no inverse.")
        inv = [0] * SIZE
        for i in range(SIZE):
            inv[self.image(i)] = i
        return inv
