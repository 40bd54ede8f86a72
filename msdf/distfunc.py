"""Integrated distribution functions of particles, one histogram per species."""

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .particles import Particle, output_file_name


class Quantity(Enum):
    """A particle quantity that can be binned or integrated as a moment."""

    X = "x"
    Y = "y"
    PX = "px"
    PY = "py"
    PZ = "pz"
    E = "E"
    EX = "Ex"
    EY = "Ey"
    EZ = "Ez"
    V = "v"
    VX = "vx"
    VY = "vy"
    VZ = "vz"
    THETA = "theta"
    THETA2 = "theta2"
    PXT = "pxt"
    PYT = "pyt"
    PZT = "pzt"
    UNITY = "1"


def parse_quantity(name: str, allow_unity: bool = False) -> Quantity:
    """Map a quantity name to a Quantity.

    ``"1"`` selects unity only when ``allow_unity`` is set. Unknown names
    select unity when ``allow_unity`` is set and ``x`` otherwise.
    """
    fallback = Quantity.UNITY if allow_unity else Quantity.X
    if name == Quantity.UNITY.value:
        return fallback
    try:
        return Quantity(name)
    except ValueError:
        return fallback


def _kinetic(p: float) -> float:
    return p * p / (math.sqrt(1.0 + p * p) + 1.0)


def _energy(pt: Particle) -> float:
    p2 = pt.momentum_squared
    return p2 / (math.sqrt(1.0 + p2) + 1.0)


def _speed(pt: Particle) -> float:
    p2 = pt.momentum_squared
    return math.sqrt(p2) / math.sqrt(1.0 + p2)


def _theta2(pt: Particle) -> float:
    theta = math.atan2(pt.py, pt.px)
    return theta * theta


# The vy and vz denominators are kept exactly as the established output defines them.
_EVALUATORS: Dict[Quantity, Callable[[Particle], float]] = {
    Quantity.X: lambda pt: pt.x,
    Quantity.Y: lambda pt: pt.y,
    Quantity.PX: lambda pt: pt.px,
    Quantity.PY: lambda pt: pt.py,
    Quantity.PZ: lambda pt: pt.pz,
    Quantity.E: _energy,
    Quantity.EX: lambda pt: _kinetic(pt.px),
    Quantity.EY: lambda pt: _kinetic(pt.py),
    Quantity.EZ: lambda pt: _kinetic(pt.pz),
    Quantity.V: _speed,
    Quantity.VX: lambda pt: pt.px / math.sqrt(1.0 + pt.momentum_squared),
    Quantity.VY: lambda pt: pt.py
    / math.sqrt(1.0 + pt.py * pt.py + pt.py * pt.py + pt.pz * pt.pz),
    Quantity.VZ: lambda pt: pt.pz
    / math.sqrt(1.0 + pt.pz * pt.pz + pt.py * pt.py + pt.pz * pt.pz),
    Quantity.THETA: lambda pt: math.atan2(pt.py, pt.px),
    Quantity.THETA2: _theta2,
    Quantity.PXT: lambda pt: math.hypot(pt.py, pt.pz),
    Quantity.PYT: lambda pt: math.hypot(pt.px, pt.pz),
    Quantity.PZT: lambda pt: math.hypot(pt.px, pt.py),
    Quantity.UNITY: lambda pt: 1.0,
}


def quantity_value(quantity: Quantity, particle: Particle) -> float:
    """Return the value of ``quantity`` for ``particle``.

    Momenta are taken as normalised to ``m c``.
    """
    return _EVALUATORS[quantity](particle)


@dataclass
class DistFuncOptions:
    """Settings for building a distribution function.

    A spatial limit in x is active if either ``xrmin`` or ``xrmax`` is given;
    the missing bound then defaults to 0. The same holds for y. A
    ``max_gamma`` of 1 or less means no upper energy limit. If ``lfactor``
    is given, particles below ``min_gamma`` are kept with their weight
    multiplied by it instead of being dropped.
    """

    axis: str = "px"
    moment: str = "1"
    xrmin: Optional[float] = None
    xrmax: Optional[float] = None
    yrmin: Optional[float] = None
    yrmax: Optional[float] = None
    dmin: float = 0.0
    dmax: float = 1.0
    dim: int = 1000
    east: bool = False
    min_gamma: float = 0.0
    max_gamma: float = 0.0
    lfactor: Optional[float] = None

    @property
    def limit_x(self) -> bool:
        return self.xrmin is not None or self.xrmax is not None

    @property
    def limit_y(self) -> bool:
        return self.yrmin is not None or self.yrmax is not None


@dataclass
class DistributionFunction:
    """Histograms for each species, indexed from species id 1 as 0.

    ``px_min`` and ``px_max`` record the range of ``px`` over all particles
    seen.
    """

    dim: int
    dmin: float
    dmax: float
    plots: List[np.ndarray] = field(default_factory=list)
    small_id_count: int = 0
    px_min: float = 1e10
    px_max: float = -1e10

    def rows(self, index: int) -> Iterator[Tuple[float, float]]:
        """Yield ``(value, content)`` for each bin of species ``index``."""
        step = (self.dmax - self.dmin) / self.dim
        for i, content in enumerate(self.plots[index]):
            yield self.dmin + i * step, float(content)

    def write(self, output_name: str = "distfunc#.dat") -> List[str]:
        """Write one plain text file per species and return the file names."""
        names = []
        for index in range(len(self.plots)):
            name = output_file_name(output_name, index)
            with Path(name).open("w") as output:
                for value, content in self.rows(index):
                    output.write(f"{value:g} {content:g}\n")
            names.append(name)
        return names


def _inside(value: float, low: Optional[float], high: Optional[float]) -> bool:
    low = 0.0 if low is None else low
    high = 0.0 if high is None else high
    return low < value < high


def distribution_function(
    particles: Iterable[Particle], options: DistFuncOptions
) -> DistributionFunction:
    """Bin the particles by one quantity, summing a weighted moment per bin."""
    dim = options.dim
    if dim < 1:
        raise ValueError(f"dim must be positive, got {dim}")
    if options.dmax == options.dmin:
        raise ValueError("dmin and dmax must differ")

    axis = parse_quantity(options.axis)
    moment = parse_quantity(options.moment, allow_unity=True)
    min_gamma2 = options.min_gamma * options.min_gamma
    max_gamma2 = options.max_gamma * options.max_gamma
    include_low_gamma = options.lfactor is not None
    limit_x = options.limit_x
    limit_y = options.limit_y
    span = options.dmax - options.dmin

    result = DistributionFunction(dim=dim, dmin=options.dmin, dmax=options.dmax)

    for particle in particles:
        result.px_min = min(result.px_min, particle.px)
        result.px_max = max(result.px_max, particle.px)

        while len(result.plots) < particle.species:
            result.plots.append(np.zeros(dim))

        if particle.species < 1:
            result.small_id_count += 1
            continue

        gamma2 = 1.0 + particle.momentum_squared
        if gamma2 >= min_gamma2 and (max_gamma2 <= 1.0 or gamma2 <= max_gamma2):
            weight_factor = 1.0
        elif include_low_gamma:
            weight_factor = options.lfactor
        else:
            continue

        if options.east and not particle.px > 0:
            continue
        if limit_x and not _inside(particle.x, options.xrmin, options.xrmax):
            continue
        if limit_y and not _inside(particle.y, options.yrmin, options.yrmax):
            continue

        data = dim * (quantity_value(axis, particle) - options.dmin) / span
        if not math.isfinite(data):
            continue
        bin_index = int(data)
        if 0 <= bin_index < dim:
            weight = weight_factor * particle.weight
            result.plots[particle.species - 1][bin_index] += (
                quantity_value(moment, particle) * weight
            )

    return result