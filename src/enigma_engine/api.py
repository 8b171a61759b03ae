"""enigma_engine.api.

Collaborator-facing facade over a :class:`~enigma_engine.machine.Machine`.

This is the surface used by the input/display side of a physical build (keyboard
decoder, plugboard scanner, rotor-position UI). It fixes the machine at three
rotors and exposes four calls:

- `EnigmaAPI.init`: select rotors (1..8), reflector (0..2) and offsets (0..25).
- `EnigmaAPI.encrypt_char`: one keypress in, one lamp out.
- `EnigmaAPI.set_plugboard_mapping`: 26-letter mapping from the scanner.
- `EnigmaAPI.get_rotor_value`: live rotor offset for display.

Each instance owns its own machine; there is no module-level state.

Rotor-configuration round trip
------------------------------
A UI that lets the operator turn the rotors should read the *live* positions
with `get_rotor_value` when entering its configuration mode, then call `init`
again with the edited positions when leaving it. Calling `init` keeps the
current plugboard mapping.
"""

from __future__ import annotations

from .machine import DEFAULT_REFLECTOR, Machine, MachineConfig


class EnigmaAPI:
    """Three-rotor machine with the firmware-style call surface."""

    def __init__(self) -> None:
        """Start with the default III/II/I, reflector B machine at AAA."""
        self._machine = Machine()

    @property
    def machine(self) -> Machine:
        """Return the owned machine."""
        return self._machine

    def init(
        self,
        rotor1: int,
        rotor2: int,
        rotor3: int,
        reflector: int = DEFAULT_REFLECTOR,
        offset1: int = 0,
        offset2: int = 0,
        offset3: int = 0,
    ) -> None:
        """(Re)configure the machine; ``rotor1`` is the rightmost rotor.

        Raises:
            ConfigurationError: On any out-of-range selector or offset. The
                previous configuration stays active.

        """
        cfg = MachineConfig(
            rotors=(rotor1, rotor2, rotor3),
            reflector=reflector,
            offsets=(offset1, offset2, offset3),
            plugboard=self._machine.plugboard,
        )
        self._machine.configure(cfg)

    def encrypt_char(self, character: str) -> str:
        """Encipher one keypress.

        Args:
            character: Key pressed; non-letters come back unchanged and do not
                step the rotors.

        Returns:
            The lamp letter (uppercase) or the unchanged character.

        """
        return self._machine.encrypt_char(character)

    def set_plugboard_mapping(self, mapping: str) -> None:
        """Store the scanner's mapping verbatim (shape-checked only)."""
        self._machine.set_plugboard(mapping)

    def get_rotor_value(self, slot: int) -> int:
        """Read the live position of one rotor.

        Args:
            slot: 0 for the rightmost rotor, 2 for the leftmost.

        Returns:
            Offset 0..25.

        Raises:
            EnigmaError: If ``slot`` is out of range.

        """
        return self._machine.get_rotor_offset(slot)
