"""enigma_engine.rotor.

Moving and fixed scrambling stages.

A :class:`Rotor` wraps a catalog :class:`~enigma_engine.catalog.RotorType` with
the per-machine state: the rotational ``offset`` and the ``turn_pending`` flag
raised when the rotor steps onto a turnover letter.

Signal model
- ``forward`` carries a signal from the cipher side (right) to the alphabet
  side (left); ``reverse`` is its exact inverse for the return pass.
- Both shift the incoming index by the offset, substitute, then un-shift.
"""

from __future__ import annotations

import logging

from .alphabet import ALPHABET, SIZE
from .catalog import ReflectorType, RotorType

logger = logging.getLogger(__name__)


class Rotor:
    """One rotating stage of the machine."""

    def __init__(self, rotor_type: RotorType, offset: int = 0) -> None:
        """Mount a catalog rotor at ``offset`` with no turnover pending.

        Args:
            rotor_type: Catalog entry supplying wiring, notch and turnover.
            offset: Starting position, taken modulo 26.

        """
        self.rotor_type = rotor_type
        self.offset = offset % SIZE
        self.turn_pending = False

        # integer lookup tables
        self._fwd = [rotor_type.wiring.image(i) for i in range(SIZE)]
        self._rev = rotor_type.wiring.inverse_table()
        self._notch = frozenset(rotor_type.notch)
        self._turnover = frozenset(rotor_type.turnover)

    @property
    def name(self) -> str:
        """Return the catalog label ("I" .. "VIII")."""
        return self.rotor_type.name

    @property
    def letter(self) -> str:
        """Return the letter currently showing in the window."""
        return ALPHABET[self.offset]

    def at_notch(self) -> bool:
        """Report whether the current position engages the double-step pawl."""
        return ALPHABET[self.offset] in self._notch

    def step(self) -> bool:
        """Advance one position and flag a turnover.

        The flag (``turn_pending``) is only ever set here; the machine clears it
        when it steps the neighbouring rotor.

        Returns:
            True if the new position is one of the rotor's turnover letters.

        """
        self.offset = (self.offset + 1) % SIZE
        hit = ALPHABET[self.offset] in self._turnover
        if hit:
            self.turn_pending = True
        logger.debug("rotor %s -> %s turnover=%s", self.name, self.letter, hit)
        return hit

    def forward(self, index: int) -> int:
        """Pass a signal from the cipher side to the alphabet side.

        The index is shifted by the offset, substituted through the wiring,
        then shifted back.

        Args:
            index: Incoming contact, 0..25.

        Returns:
            Outgoing contact, 0..25.

        """
        shifted = (index + self.offset) % SIZE
        return (SIZE + self._fwd[shifted] - self.offset) % SIZE

    def reverse(self, index: int) -> int:
        """Pass a signal back through the rotor on the return path.

        Uses the inverse wiring, so ``reverse(forward(i)) == i`` at any offset.

        Args:
            index: Incoming contact, 0..25.

        Returns:
            Outgoing contact, 0..25.

        """
        shifted = (index + self.offset) % SIZE
        return (SIZE + self._rev[shifted] - self.offset) % SIZE

    def __repr__(self) -> str:
        """Return a debug view with name, window letter and pending flag."""
        return f"<Rotor {self.name} pos={self.letter} pending={self.turn_pending}>"


class Reflector:
    """Stateless involutive substitution at the end of the rotor stack."""

    def __init__(self, reflector_type: ReflectorType) -> None:
        """Wrap a catalog reflector."""
        self.reflector_type = reflector_type

    @property
    def name(self) -> str:
        """Return the catalog label ("A", "B" or "C")."""
        return self.reflector_type.name

    def reflect(self, index: int) -> str:
        """Return the letter wired to ``index``; callers re-derive its index."""
        return self.reflector_type.wiring[index]

    def __repr__(self) -> str:
        """Return a debug view with the reflector name."""
        return f"<Reflector {self.name}>"
