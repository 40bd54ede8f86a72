"""Particle records, physical constants and per-species output naming."""

from dataclasses import dataclass

#: The electron mass in SI units.
MASS_ELECTRON = 9.10938188e-31
#: The proton mass in SI units.
MASS_PROTON = 1.67262158e-27
#: The Boltzmann constant in SI units.
BOLTZMANN = 1.3806503e-23
#: The speed of light in SI units.
SPEED_OF_LIGHT = 2.99792458e8


@dataclass(frozen=True)
class Particle:
    """A single macro-particle with its species, weight, momentum and position.

    Species ids start at 1; ids below 1 are counted as invalid by the
    analysis routines.
    """

    species: int
    weight: float
    px: float
    py: float
    pz: float
    x: float = 0.0
    y: float = 0.0

    @property
    def momentum_squared(self) -> float:
        """The squared magnitude of the momentum."""
        return self.px * self.px + self.py * self.py + self.pz * self.pz


def output_file_name(pattern: str, species_id: int) -> str:
    """Build the output file name for a species.

    The first ``#`` in ``pattern`` is replaced by the species id; if the
    pattern holds no ``#``, the id is appended to it.
    """
    species = str(species_id)
    if "#" in pattern:
        return pattern.replace("#", species, 1)
    return pattern + species