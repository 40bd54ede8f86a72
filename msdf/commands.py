"""The registry of msdf commands and the general help text."""

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class CommandInfo:
    """A command as supplied by the user: its name and a short description."""

    name: str
    description: str


_COMMANDS: Tuple[CommandInfo, ...] = (
    CommandInfo("ls", "list the contents of an SDF file"),
    CommandInfo("toh5", "writes a data block to HDF5"),
    CommandInfo("pcount", "counts the number of particles of each species"),
    CommandInfo(
        "penergy",
        "calculates (nonrelativistic!) thermal energies of particles of each species",
    ),
    CommandInfo(
        "phaseplot", "Writes phase-plots for species and stores in hdf5 format."
    ),
    CommandInfo(
        "screen", "Projects particles onto a screen and writes in ascii format."
    ),
    CommandInfo(
        "angular",
        "Writes angular distribution plot for each species and stores in plain "
        "ascii format files readable by GNUplot.",
    ),
    CommandInfo(
        "distfunc",
        "Writes integrated distribution function for each species and stores in "
        "plain ascii format files readable by GNUplot.",
    ),
)


def register_commands() -> Dict[str, CommandInfo]:
    """Return all known commands keyed by name, in name order."""
    return {info.name: info for info in sorted(_COMMANDS, key=lambda c: c.name)}


def format_help(commands: Mapping[str, CommandInfo]) -> str:
    """Return the general usage text listing the given commands."""
    parts = [
        "\n  Manipulate SDF files\n\n  Usage:\n",
        "    msdf command [options]\n\n",
        "  where 'command' is one of the following:\n\n",
    ]
    for key in sorted(commands):
        info = commands[key]
        parts.append(f"      {info.name:<10}  {info.description}\n")
    parts.append(
        "\n  Type\n    mcfd help command\n  to get more help on individual commands.\n\n"
    )
    return "".join(parts)