"""Angular distributions of particles, one histogram per species."""

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .particles import MASS_ELECTRON, SPEED_OF_LIGHT, Particle, output_file_name

_MC = MASS_ELECTRON * SPEED_OF_LIGHT


class Axis(Enum):
    """A particle quantity that can span one axis of the angular plot."""

    X = "x"
    Y = "y"
    PX = "px"
    PY = "py"
    PZ = "pz"


def parse_axis(name: str) -> Axis:
    """Map an axis name to an Axis; unknown names select ``x``."""
    try:
        return Axis(name)
    except ValueError:
        return Axis.X


def axis_value(axis: Axis, particle: Particle) -> float:
    """Return the quantity of ``particle`` that ``axis`` selects."""
    return getattr(particle, axis.value)


@dataclass
class AngularOptions:
    """Settings for building an angular distribution.

    A spatial limit in x is active if either ``xrmin`` or ``xrmax`` is given;
    the missing bound then defaults to 0. The same holds for y. A
    ``max_gamma`` below 1 means no upper energy limit.
    """

    x_axis: str = "px"
    y_axis: str = "py"
    xrmin: Optional[float] = None
    xrmax: Optional[float] = None
    yrmin: Optional[float] = None
    yrmax: Optional[float] = None
    dim: int = 1000
    min_gamma: float = 0.0
    max_gamma: float = 0.0
    stretch: bool = False

    @property
    def limit_x(self) -> bool:
        return self.xrmin is not None or self.xrmax is not None

    @property
    def limit_y(self) -> bool:
        return self.yrmin is not None or self.yrmax is not None


@dataclass
class AngularDistribution:
    """Angular histograms for each species, indexed from species id 1 as 0."""

    dim: int
    plots: List[np.ndarray] = field(default_factory=list)
    small_id_count: int = 0

    def rows(self, index: int) -> Iterator[Tuple[float, float, float, float]]:
        """Yield ``(x, y, angle, r)`` for each bin of species ``index``.

        The first and last bins describe the same direction and are merged.
        """
        grid = self.plots[index].copy()
        grid[0] += grid[self.dim]
        grid[self.dim] = grid[0]
        for i, r in enumerate(grid):
            angle = math.pi * (2.0 * i / self.dim - 1.0)
            r = float(r)
            yield r * math.cos(angle), r * math.sin(angle), angle, r

    def write(self, output_name: str = "phaseplot#.dat") -> List[str]:
        """Write one plain text file per species and return the file names."""
        names = []
        for index in range(len(self.plots)):
            name = output_file_name(output_name, index)
            with Path(name).open("w") as output:
                for x, y, angle, r in self.rows(index):
                    output.write(f"{x:g} {y:g} {angle:g} {r:g}\n")
            names.append(name)
        return names


def _inside(value: float, low: Optional[float], high: Optional[float]) -> bool:
    low = 0.0 if low is None else low
    high = 0.0 if high is None else high
    return low < value < high


def angular_distribution(
    particles: Iterable[Particle], options: AngularOptions
) -> AngularDistribution:
    """Bin the particles by the angle spanned by the two chosen axes."""
    dim = options.dim
    if dim < 1:
        raise ValueError(f"dim must be positive, got {dim}")

    x_axis = parse_axis(options.x_axis)
    y_axis = parse_axis(options.y_axis)
    min_gamma2 = options.min_gamma * options.min_gamma
    max_gamma2 = options.max_gamma * options.max_gamma
    limit_x = options.limit_x
    limit_y = options.limit_y

    result = AngularDistribution(dim=dim)

    for particle in particles:
        while len(result.plots) < particle.species:
            result.plots.append(np.zeros(dim + 1))

        if particle.species < 1:
            result.small_id_count += 1
            continue

        gamma2 = 1.0 + particle.momentum_squared / (_MC * _MC)
        if gamma2 < min_gamma2:
            continue
        if options.max_gamma >= 1.0 and gamma2 > max_gamma2:
            continue
        if limit_x and not _inside(particle.x, options.xrmin, options.xrmax):
            continue
        if limit_y and not _inside(particle.y, options.yrmin, options.yrmax):
            continue

        big_x = axis_value(x_axis, particle)
        big_y = axis_value(y_axis, particle)
        angle = dim * (math.atan2(big_y, big_x) / (2.0 * math.pi) + 0.5)
        weight = particle.weight
        if options.stretch:
            weight *= math.hypot(big_x, big_y)

        bin_index = int(angle)
        frac = angle - bin_index
        if bin_index < 0:
            bin_index, frac = 0, 0.0
        if bin_index >= dim:
            bin_index, frac = dim - 1, 1.0

        grid = result.plots[particle.species - 1]
        grid[bin_index] += weight * (1.0 - frac)
        grid[bin_index + 1] += weight * frac

    return result