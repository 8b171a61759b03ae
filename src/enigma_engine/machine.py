"""enigma_engine.machine.

The cipher engine: a rotor stack, a reflector and a plugboard mapping.

Keypress pipeline (`Machine.encrypt_char`)

1) **Pass-through**
   - Anything that is not an ASCII letter is returned unchanged and the
     rotors do not move.

2) **Plugboard in**
   - The uppercased letter is substituted through the plugboard mapping.

3) **Stepping** (slot 0 is the rightmost, fastest rotor)
   - Slot 0 always steps.
   - If slot 1 sits on its own notch it steps as well (the double-step).
   - Walking up the stack, every rotor with a pending turnover clears the
     flag and steps its left neighbour, which may cascade further.

4) **Signal path**
   - Forward through slots 0..N-1, reflect, then reverse through N-1..0.

5) **Plugboard out**
   - The resulting letter is substituted through the plugboard again.

Because the reflector has no fixed points and stepping is deterministic, a
machine reset to the same configuration turns ciphertext back into plaintext.

Configuration is all-or-nothing: `Machine.configure` validates a
:class:`MachineConfig` completely before swapping in a fresh rotor stack, so a
rejected configuration leaves the running machine untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from .alphabet import ALPHABET, SIZE, Permutation, index_of, is_letter, upper_ascii
from .catalog import (
    ROTOR_SELECTOR_MAX,
    parse_reflector_selector,
    parse_rotor_selector,
    reflector_type,
    rotor_type,
)
from .errors import ConfigurationError, EnigmaError
from .plugboard import mapping_from_pairs, validate_mapping
from .rotor import Reflector, Rotor

logger = logging.getLogger(__name__)

MAX_ROTORS = ROTOR_SELECTOR_MAX
DEFAULT_ROTORS: tuple[int, ...] = (3, 2, 1)
DEFAULT_REFLECTOR = 1  # B


@dataclass(frozen=True)
class MachineConfig:
    """A complete machine setting, in slot order.

    Attributes:
        rotors:
            Rotor selectors 1..8; index 0 is the rightmost (fastest) rotor.
        reflector:
            Reflector selector 0..2 (A, B, C).
        offsets:
            Initial offsets 0..25, one per rotor. Empty means all zero.
        plugboard:
            26-letter mapping; identity means no cables.

    """

    rotors: tuple[int, ...] = DEFAULT_ROTORS
    reflector: int = DEFAULT_REFLECTOR
    offsets: tuple[int, ...] = ()
    plugboard: str = ALPHABET

    def effective_offsets(self) -> tuple[int, ...]:
        """Return the configured offsets, or all zero when none were given."""
        if not self.offsets:
            return (0,) * len(self.rotors)
        return tuple(self.offsets)

    def validate(self) -> None:
        """Check every field; raise on the first problem.

        Raises:
            ConfigurationError: On an invalid rotor count, selector, offset or
                plugboard shape.

        """
        if not 1 <= len(self.rotors) <= MAX_ROTORS:
            raise ConfigurationError(
                f"Rotor count must be 1..{MAX_ROTORS}, got {len(self.rotors)}."
            )
        for selector in self.rotors:
            rotor_type(selector)
        reflector_type(self.reflector)

        offsets = self.effective_offsets()
        if len(offsets) != len(self.rotors):
            raise ConfigurationError(
                f"Expected {len(self.rotors)} offsets, got {len(offsets)}."
            )
        _check_offsets(offsets)
        Permutation(self.plugboard)

    @classmethod
    def from_notation(
        cls,
        rotors: str = "I II III",
        reflector: str = "B",
        positions: str = "",
        plugs: Iterable[str] = (),
    ) -> MachineConfig:
        """Parse operator notation, written left to right as on the machine.

        Example:
            ``from_notation("I II III", "B", "AAA", ["AZ"])`` puts rotor III in
            slot 0 (rightmost) and rotor I in slot 2.

        Args:
            rotors:
                Whitespace/comma separated Roman numerals or digits.
            reflector:
                "A", "B", "C" or a selector digit.
            positions:
                Window letters ("ADU") or whitespace separated numbers
                ("0 3 20"), left to right. Empty means all zero.
            plugs:
                Cable pairs such as "AZ".

        Raises:
            ConfigurationError: On any unparsable token.

        """
        tokens = rotors.replace(",", " ").split()
        selectors = tuple(parse_rotor_selector(t) for t in reversed(tokens))
        offsets = tuple(reversed(_parse_positions(positions)))

        return cls(
            rotors=selectors,
            reflector=parse_reflector_selector(reflector),
            offsets=offsets,
            plugboard=mapping_from_pairs(plugs),
        )


def _parse_positions(positions: str) -> list[int]:
    """Parse window letters or numbers into offsets, left to right."""
    text = positions.replace(",", " ").strip()
    if text == "":
        return []
    parts = text.split()
    if len(parts) == 1 and parts[0].isalpha():
        bad = [ch for ch in parts[0] if not is_letter(ch)]
        if bad:
            raise ConfigurationError(f"Invalid rotor positions: {positions!r} ({bad!r} not A-Z)")
        return [index_of(ch) for ch in parts[0].upper()]
    try:
        return [int(p, 10) for p in parts]
    except ValueError as exc:
        raise ConfigurationError(f"Invalid rotor positions: {positions!r}") from exc


def _check_offsets(offsets: Sequence[int]) -> None:
    for off in offsets:
        if not 0 <= off < SIZE:
            raise ConfigurationError(f"Rotor offset {off} out of range 0..{SIZE - 1}.")


class Machine:
    """Rotor cipher machine; exclusively owns its rotor stack."""

    def __init__(self, config: MachineConfig | None = None) -> None:
        """Build a machine from ``config``, or the default III/II/I, B setting."""
        self._config: MachineConfig
        self._rotors: list[Rotor] = []
        self._reflector: Reflector
        self._plugboard = ALPHABET
        self.configure(config if config is not None else MachineConfig())

    # -- configuration -------------------------------------------------

    @property
    def config(self) -> MachineConfig:
        """Return the last accepted configuration (offsets as configured, not live)."""
        return self._config

    @property
    def rotors(self) -> tuple[Rotor, ...]:
        """Return the rotor stack in slot order (slot 0 first)."""
        return tuple(self._rotors)

    @property
    def reflector(self) -> Reflector:
        """Return the mounted reflector."""
        return self._reflector

    @property
    def plugboard(self) -> str:
        """Return the current 26-letter plugboard mapping."""
        return self._plugboard

    def configure(self, config: MachineConfig) -> None:
        """Replace the rotor stack, reflector and plugboard in one step.

        Raises:
            ConfigurationError: If ``config`` is invalid; nothing changes then.

        """
        config.validate()

        rotors = [
            Rotor(rotor_type(sel), off)
            for sel, off in zip(config.rotors, config.effective_offsets(), strict=True)
        ]
        reflector = Reflector(reflector_type(config.reflector))

        self._rotors = rotors
        self._reflector = reflector
        self._plugboard = config.plugboard
        self._config = config
        logger.info(
            "configured rotors=%s reflector=%s offsets=%s",
            [r.name for r in rotors],
            reflector.name,
            list(config.effective_offsets()),
        )

    def reset(self) -> None:
        """Return every rotor to its configured starting offset.

        The current plugboard mapping is kept.
        """
        self.configure(replace(self._config, plugboard=self._plugboard))

    def set_plugboard(self, mapping: str | Permutation, *, strict: bool = False) -> None:
        """Replace the plugboard mapping.

        Only the shape is checked (26 letters A–Z). Callers are responsible for
        supplying an involutive permutation; otherwise decryption will not
        invert encryption. Pass ``strict=True`` to have that checked here.

        Raises:
            ConfigurationError: If the mapping is malformed (or, with
                ``strict``, not a symmetric permutation).

        """
        wiring = upper_ascii(str(mapping))
        if strict:
            validate_mapping(wiring, involutive=True)
        else:
            Permutation(wiring)
        self._plugboard = wiring

    def get_rotor_offset(self, slot: int) -> int:
        """Return the live offset (0..25) of the rotor in ``slot``."""
        if not 0 <= slot < len(self._rotors):
            raise EnigmaError(f"No rotor in slot {slot}.")
        return self._rotors[slot].offset

    def rotor_offsets(self) -> tuple[int, ...]:
        """Return the live offsets in slot order."""
        return tuple(r.offset for r in self._rotors)

    def set_rotor_offsets(self, offsets: Sequence[int]) -> None:
        """Write back rotor positions (e.g. after manual adjustment).

        Pending turnover flags are cleared, as on a fresh configuration.

        Raises:
            ConfigurationError: On a count mismatch or out-of-range offset.

        """
        if len(offsets) != len(self._rotors):
            raise ConfigurationError(
                f"Expected {len(self._rotors)} offsets, got {len(offsets)}."
            )
        _check_offsets(offsets)
        for rotor, off in zip(self._rotors, offsets, strict=True):
            rotor.offset = off
            rotor.turn_pending = False

    # -- enciphering ---------------------------------------------------

    def _step(self) -> None:
        rotors = self._rotors
        rotors[0].step()

        # Double step: the middle rotor moves itself when sitting on its notch.
        if len(rotors) > 1 and rotors[1].at_notch():
            rotors[1].step()

        for i in range(len(rotors) - 1):
            if rotors[i].turn_pending:
                rotors[i].turn_pending = False
                rotors[i + 1].step()

        logger.debug("positions %s", "".join(r.letter for r in reversed(rotors)))

    def encrypt_char(self, c: str) -> str:
        """Encipher one character, advancing the rotors first.

        Non-letters are returned unchanged without stepping. Letters are
        returned uppercase.

        Raises:
            EnigmaError: If ``c`` is not a single-character string.

        """
        if not isinstance(c, str) or len(c) != 1:
            raise EnigmaError(f"Expected a single character, got {c!r}.")
        if not is_letter(c):
            return c

        plugged = self._plugboard[index_of(c.upper())]
        self._step()

        index = index_of(plugged)
        for rotor in self._rotors:
            index = rotor.forward(index)

        index = index_of(self._reflector.reflect(index))

        for rotor in reversed(self._rotors):
            index = rotor.reverse(index)

        return self._plugboard[index]

    def encrypt_text(self, text: str) -> str:
        """Encipher a string character by character."""
        return "".join(self.encrypt_char(ch) for ch in text)

    def __repr__(self) -> str:
        """Return a debug view with the stack, left to right, and reflector."""
        stack = " ".join(f"{r.name}@{r.letter}" for r in reversed(self._rotors))
        return f"<Machine [{stack}] reflector={self._reflector.name}>"
