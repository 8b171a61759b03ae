"""enigma_engine.cli.

Command-line interface for **enigma-engine**.

This module exposes a small Typer-based CLI that can:

- Encipher (or decipher; the machine is self-reciprocal) a message.
- Show the built-in rotor and reflector catalog.

Design notes
- Machine settings use operator notation, written left to right as they appear
  in the machine window: ``--rotors "I II III" --positions ADU``. The rightmost
  rotor is the fast one.
- Every setting can also come from the environment (`ENIGMA_ROTORS`,
  `ENIGMA_REFLECTOR`, `ENIGMA_POSITIONS`, `ENIGMA_PLUGS`).
- Validation errors are raised as :class:`~enigma_engine.errors.EnigmaError` and
  converted to non-zero exit codes.
- Options are defined as module-level constants to keep defaults static and
  formatter/linter-friendly.

Commands
- `encrypt`: Encipher `--text` and print the result.
- `decrypt`: Same transformation, labelled as plaintext.
- `catalog`: Print rotor wiring/notch/turnover and reflector tables.

"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .alphabet import sanitize_text
from .catalog import REFLECTOR_TYPES, ROTOR_TYPES
from .errors import EnigmaError
from .machine import Machine, MachineConfig

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()

DEFAULT_ROTORS = "I II III"
DEFAULT_REFLECTOR = "B"
DEFAULT_POSITIONS = ""


# Typer Option infos (avoid function-calls in defaults; keep Ruff happy)
TEXT_OPT = typer.Option(..., "--text", help="Message to encipher.")
ROTORS_OPT = typer.Option(
    DEFAULT_ROTORS,
    "--rotors",
    envvar="ENIGMA_ROTORS",
    help="Rotors left to right (Roman numerals or 1-8).",
)
REFLECTOR_OPT = typer.Option(
    DEFAULT_REFLECTOR, "--reflector", envvar="ENIGMA_REFLECTOR", help="Reflector A, B or C."
)
POSITIONS_OPT = typer.Option(
    DEFAULT_POSITIONS,
    "--positions",
    envvar="ENIGMA_POSITIONS",
    help="Starting window letters left to right, e.g. ADU. Empty means all A.",
)
PLUG_OPT = typer.Option(
    None,
    "--plug",
    envvar="ENIGMA_PLUGS",
    help="Plugboard cable (repeat option). Example: --plug AZ --plug BY",
    show_default=False,
)
STRIP_OPT = typer.Option(False, "--strip", help="Drop everything except A-Z before enciphering.")
VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Log rotor stepping.")


def _configure_logging(verbose: bool) -> None:
    """Route library logging through Rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _run(
    text: str,
    rotors: str,
    reflector: str,
    positions: str,
    plugs: list[str] | None,
    strip: bool,
) -> str:
    """Build a machine from operator notation and run ``text`` through it."""
    cfg = MachineConfig.from_notation(
        rotors=rotors,
        reflector=reflector,
        positions=positions,
        plugs=plugs or [],
    )
    machine = Machine(cfg)
    source = sanitize_text(text) if strip else text
    return machine.encrypt_text(source)


@app.callback()
def main(verbose: bool = VERBOSE_OPT) -> None:
    """Run the rotor cipher machine simulator."""
    _configure_logging(verbose)


@app.command("encrypt")
def encrypt(
    text: str = TEXT_OPT,
    rotors: str = ROTORS_OPT,
    reflector: str = REFLECTOR_OPT,
    positions: str = POSITIONS_OPT,
    plugs: list[str] | None = PLUG_OPT,
    strip: bool = STRIP_OPT,
) -> None:
    """Encipher a message.

    Non-letters pass through unchanged (and do not move the rotors) unless
    `--strip` is given.

    Raises:
        typer.Exit: Exit code 1 on domain errors, after printing a message.

    """
    try:
        out = _run(text, rotors, reflector, positions, plugs, strip)
        console.print(Panel.fit(out, title="ciphertext"))
    except EnigmaError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc


@app.command("decrypt")
def decrypt(
    text: str = TEXT_OPT,
    rotors: str = ROTORS_OPT,
    reflector: str = REFLECTOR_OPT,
    positions: str = POSITIONS_OPT,
    plugs: list[str] | None = PLUG_OPT,
    strip: bool = STRIP_OPT,
) -> None:
    """Decipher a message (same settings as used to encipher it)."""
    try:
        out = _run(text, rotors, reflector, positions, plugs, strip)
        console.print(Panel.fit(out, title="plaintext"))
    except EnigmaError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc


@app.command("catalog")
def catalog() -> None:
    """Print the rotor and reflector tables."""
    rotors = Table(title="Rotors")
    rotors.add_column("#", justify="right")
    rotors.add_column("Rotor")
    rotors.add_column("Wiring")
    rotors.add_column("Notch")
    rotors.add_column("Turnover")
    for i, r in enumerate(ROTOR_TYPES, start=1):
        rotors.add_row(str(i), r.name, str(r.wiring), r.notch, r.turnover)

    reflectors = Table(title="Reflectors")
    reflectors.add_column("#", justify="right")
    reflectors.add_column("Reflector")
    reflectors.add_column("Wiring")
    for i, refl in enumerate(REFLECTOR_TYPES):
        reflectors.add_row(str(i), refl.name, str(refl.wiring))

    console.print(rotors)
    console.print(reflectors)
