from __future__ import annotations

"""Deterministic hashing, seeded random draws and layered Perlin noise."""

import math
from typing import Tuple

_MASK64 = 0xFFFFFFFFFFFFFFFF

# Channel tags keep independent noise fields and random streams apart.
CHANNEL_ELEVATION = 0xE1E7
CHANNEL_DETAIL = 0xDE7A
CHANNEL_VEGETATION = 0x7E6E
CHANNEL_ROUGH = 0x2064
CHANNEL_PLACEMENT = 0x91AC
CHANNEL_SETTLEMENT = 0x5E77
CHANNEL_NAMES = 0x4A3E


def stable_hash(*args: int) -> int:
    """Mix any number of integers into one reproducible 64-bit value."""
    x = 0x345678ABCDEF1234
    for a in args:
        a &= _MASK64
        a ^= a >> 33
        a = (a * 0xFF51AFD7ED558CCD) & _MASK64
        a ^= a >> 33
        x ^= a
        x = (x * 0xC4CEB9FE1A85EC53) & _MASK64
    x ^= x >> 29
    return x


def seeded_random(*keys: int) -> float:
    """Uniform value in [0, 1) fully determined by the integer keys."""
    return stable_hash(*keys) / float(1 << 64)


def channel_seed(seed: int, channel: int) -> int:
    """Seed for one named noise field of a world."""
    return stable_hash(seed, channel)


def _smoothstep5(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _mix(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _corner(ix: int, iy: int, x: float, y: float, seed: int) -> float:
    # Contribution of lattice corner (ix, iy): its hashed unit gradient dotted with the offset
    angle = seeded_random(ix, iy, seed) * 2.0 * math.pi
    return math.cos(angle) * (x - ix) + math.sin(angle) * (y - iy)


def _octave(x: float, y: float, seed: int) -> float:
    """One octave of gradient noise, scaled to roughly [-1, 1]."""
    x0 = math.floor(x)
    y0 = math.floor(y)
    tx = _smoothstep5(x - x0)
    ty = _smoothstep5(y - y0)

    top = _mix(_corner(x0, y0, x, y, seed), _corner(x0 + 1, y0, x, y, seed), tx)
    bottom = _mix(_corner(x0, y0 + 1, x, y, seed), _corner(x0 + 1, y0 + 1, x, y, seed), tx)
    # Unit gradients peak at sqrt(1/2)
    return _mix(top, bottom, ty) * math.sqrt(2.0)


def perlin_noise(
    x: float,
    y: float,
    seed: int,
    octaves: int = 4,
    persistence: float = 0.5,
    lacunarity: float = 2.0,
    scale: float = 0.02,
) -> float:
    """
    Sum `octaves` layers of gradient noise, each `lacunarity` times finer and
    `persistence` times weaker than the last, remapped into [0, 1].
    """
    value = 0.0
    amplitude = 1.0
    frequency = scale
    max_amp = 0.0

    for i in range(octaves):
        value += _octave(x * frequency, y * frequency, seed + i) * amplitude
        max_amp += amplitude
        amplitude *= persistence
        frequency *= lacunarity

    if max_amp <= 0:
        return 0.5
    return max(0.0, min(1.0, (value / max_amp + 1.0) / 2.0))


__all__ = [
    "CHANNEL_DETAIL",
    "CHANNEL_ELEVATION",
    "CHANNEL_NAMES",
    "CHANNEL_PLACEMENT",
    "CHANNEL_ROUGH",
    "CHANNEL_SETTLEMENT",
    "CHANNEL_VEGETATION",
    "channel_seed",
    "perlin_noise",
    "seeded_random",
    "stable_hash",
]
