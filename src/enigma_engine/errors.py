"""enigma_engine.errors.

Exception types raised by the cipher engine.

All errors derive from :class:`EnigmaError` so callers (the CLI, UI
collaborators) can catch a single type and convert it to a user-facing message.
"""

from __future__ import annotations


class EnigmaError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(EnigmaError):
    """Raised when a machine configuration is rejected.

    A rejected configuration never partially applies: the machine keeps its
    previous rotor stack, reflector and plugboard.
    """
