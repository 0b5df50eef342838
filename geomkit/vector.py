"""2D vector type and in-place arithmetic helpers.

Most helpers mutate their first argument. Where a ``y`` argument is
optional it defaults to ``x``, so ``vec_mult(v, 2)`` scales uniformly.
"""

import math
from dataclasses import dataclass, field

import numpy as np


@dataclass
class Vector:
    """A mutable 2D vector."""
    x: float = 0.0
    y: float = 0.0

    def __str__(self):
        return f"Vector ({self.x}, {self.y})"


@dataclass
class VectorConfig:
    """Module-wide settings for the vector helpers.

    ``random`` is the uniform [0, 1) source used by ``vec_rand``.
    """
    random: object = field(default=np.random.random_sample)


vecconfig = VectorConfig()


def vec(x=0.0, y=0.0):
    return Vector(x, y)


def vec_copy(v):
    return Vector(v.x, v.y)


def vec_set(v, x, y=None):
    v.x = x
    v.y = x if y is None else y
    return v


def vec_add(v, x, y=None):
    v.x += x
    v.y += x if y is None else y
    return v


def vec_sub(v, x, y=None):
    v.x -= x
    v.y -= x if y is None else y
    return v


def vec_mult(v, x, y=None):
    v.x *= x
    v.y *= x if y is None else y
    return v


def vec_div(v, x, y=None):
    v.x /= x
    v.y /= x if y is None else y
    return v


def vec_rot(v, radians):
    """Rotate ``v`` counter-clockwise by ``radians``, keeping its length."""
    cos = math.cos(radians)
    sin = math.sin(radians)
    v.x, v.y = cos * v.x - sin * v.y, sin * v.x + cos * v.y
    return v


def vec_mag(v):
    return math.sqrt(v.x * v.x + v.y * v.y)


def vec_mag2(v):
    return v.x * v.x + v.y * v.y


def vec_norm(v, copy=False):
    """Scale ``v`` to unit length. A zero vector is returned unchanged.

    Args:
        v: The vector.
        copy: If True, normalize and return a copy, leaving ``v`` alone.
    """
    v = vec_copy(v) if copy else v
    length = vec_mag(v)
    if length > 0:
        vec_div(v, length)
    return v


def vec_limit(v, max_length):
    """Clamp the magnitude of ``v`` to ``max_length``."""
    sq = vec_mag2(v)
    if sq > max_length * max_length:
        vec_div(v, math.sqrt(sq))
        vec_mult(v, max_length)
    return v


def vec_dist(a, b):
    return math.sqrt(vec_dist2(a, b))


def vec_dist2(a, b):
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def vec_dir(v):
    """Angle of ``v`` from the positive x-axis, in radians."""
    return math.atan2(v.y, v.x)


def vec_dot(a, b):
    return a.x * b.x + a.y * b.y


def vec_cross(a, b):
    """Z component of the 3D cross product (signed parallelogram area)."""
    return a.x * b.y - a.y * b.x


def vec_lerp(a, b, t):
    """Move ``a`` toward ``b`` by fraction ``t`` (0 keeps ``a``, 1 gives ``b``).

    A NaN step (e.g. ``inf * 0``) leaves that component unchanged.
    """
    a.x += _finite_step((b.x - a.x) * t)
    a.y += _finite_step((b.y - a.y) * t)
    return a


def _finite_step(d):
    return 0.0 if math.isnan(d) else d


def vec_rand(min_length=1.0, max_length=None):
    """Vector with a random direction and length in [min_length, max_length).

    Draws from ``vecconfig.random``; replace it for reproducible output.
    """
    if max_length is None:
        max_length = min_length
    angle = vecconfig.random() * 2 * math.pi
    radius = vecconfig.random() * (max_length - min_length) + min_length
    return Vector(math.cos(angle) * radius, math.sin(angle) * radius)
