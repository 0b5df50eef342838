"""Value-lattice Perlin noise with octave layering and deterministic seeding.

The lattice holds 4096 random scalars. A 3D coordinate is folded into a
flat lattice offset with bit shifts and interpolated with a cosine curve.
"""

import logging
import math
import numbers

import numpy as np

# Wrap geometry for folding (x, y, z) cells into one flat index
PERLIN_YWRAPB = 4
PERLIN_YWRAP = 1 << PERLIN_YWRAPB
PERLIN_ZWRAPB = 8
PERLIN_ZWRAP = 1 << PERLIN_ZWRAPB
PERLIN_SIZE = 4095

DEFAULT_OCTAVES = 4
DEFAULT_FALLOFF = 0.5


def scaled_cosine(t):
    """Cosine smoothing curve: 0.5 * (1 - cos(t * pi))."""
    return 0.5 * (1.0 - math.cos(t * math.pi))


def _fold(v):
    """Mirror a coordinate across zero."""
    return abs(v)


def _to_uint32(value):
    """Coerce a number to an unsigned 32-bit integer.

    Truncates toward zero and wraps modulo 2**32. NaN and infinities
    become 0.
    """
    if isinstance(value, numbers.Integral):
        return int(value) % _Lcg.M
    value = float(value)
    if not math.isfinite(value):
        return 0
    return int(value) % _Lcg.M


class _Lcg:
    """Linear congruential generator (Numerical Recipes constants)."""

    M = 4294967296
    A = 1664525
    C = 1013904223

    def __init__(self, random=None):
        self._random = random
        self.seed = None
        self._state = 0

    def set_seed(self, value=None):
        if value is None:
            value = self._random() * self.M
        self.seed = self._state = _to_uint32(value)

    def next(self):
        self._state = (self.A * self._state + self.C) % self.M
        # state < M, so the result is always below 1
        return self._state / self.M


class Noise:
    """Multi-octave Perlin noise over a 4096-slot random lattice.

    The lattice is created lazily from the injected random source on the
    first sample, or deterministically by ``reseed``.

    Args:
        random: Zero-argument callable returning floats in [0, 1). Used for
            the lazy lattice and for drawing implicit seeds. Defaults to
            ``numpy.random.random_sample``.
        logger: Logger for lattice lifecycle messages.
    """

    def __init__(self, random=None, logger=None):
        self._random = random if random is not None else np.random.random_sample
        self.logger = logger or logging.getLogger(__name__)
        self._perlin = None
        self._seed = None
        self._octaves = DEFAULT_OCTAVES
        self._falloff = DEFAULT_FALLOFF

    @property
    def octaves(self):
        return self._octaves

    @property
    def falloff(self):
        return self._falloff

    @property
    def seed(self):
        """Seed of the current lattice, or None for a lazily filled one."""
        return self._seed

    @property
    def lattice(self):
        """Copy of the lattice values (initializing it if needed)."""
        self._ensure_lattice()
        return self._perlin.copy()

    def _ensure_lattice(self):
        if self._perlin is not None:
            return
        self._perlin = np.array(
            [self._random() for _ in range(PERLIN_SIZE + 1)], dtype=np.float64
        )
        self.logger.debug("Filled noise lattice from ambient random source.")

    def reseed(self, seed=None):
        """Replace the lattice with one filled from a seeded LCG.

        Args:
            seed: Integer-coercible seed. If None, a seed is drawn from the
                random source first and is available afterwards as
                ``self.seed``.
        """
        lcg = _Lcg(self._random)
        lcg.set_seed(seed)
        # Build fully before swapping so samplers never see a partial lattice
        perlin = np.empty(PERLIN_SIZE + 1, dtype=np.float64)
        for i in range(PERLIN_SIZE + 1):
            perlin[i] = lcg.next()
        self._perlin = perlin
        self._seed = lcg.seed
        self.logger.debug(f"Reseeded noise lattice with seed {lcg.seed}")

    def configure_detail(self, octaves=None, falloff=None):
        """Set the octave count and per-octave amplitude falloff.

        Non-positive or missing values leave the corresponding setting
        untouched.

        Returns:
            The engine, for chaining.
        """
        if octaves is not None and octaves > 0:
            self._octaves = int(octaves)
        if falloff is not None and falloff > 0:
            self._falloff = falloff
        return self

    def sample(self, x, y=0, z=0):
        """Sample the noise field at (x, y, z).

        Returns:
            A float, close to [0, 1) for the default detail settings.
        """
        self._ensure_lattice()
        p = self._perlin

        x, y, z = _fold(x), _fold(y), _fold(z)

        xi, yi, zi = math.floor(x), math.floor(y), math.floor(z)
        xf = x - xi
        yf = y - yi
        zf = z - zi

        r = 0.0
        ampl = 0.5

        for _ in range(self._octaves):
            of = xi + (yi << PERLIN_YWRAPB) + (zi << PERLIN_ZWRAPB)

            rxf = scaled_cosine(xf)
            ryf = scaled_cosine(yf)

            n1 = p[of & PERLIN_SIZE]
            n1 += rxf * (p[(of + 1) & PERLIN_SIZE] - n1)
            n2 = p[(of + PERLIN_YWRAP) & PERLIN_SIZE]
            n2 += rxf * (p[(of + PERLIN_YWRAP + 1) & PERLIN_SIZE] - n2)
            n1 += ryf * (n2 - n1)

            of += PERLIN_ZWRAP
            n2 = p[of & PERLIN_SIZE]
            n2 += rxf * (p[(of + 1) & PERLIN_SIZE] - n2)
            n3 = p[(of + PERLIN_YWRAP) & PERLIN_SIZE]
            n3 += rxf * (p[(of + PERLIN_YWRAP + 1) & PERLIN_SIZE] - n3)
            n2 += ryf * (n3 - n2)

            n1 += scaled_cosine(zf) * (n2 - n1)

            r += n1 * ampl
            ampl *= self._falloff

            xi <<= 1
            xf *= 2
            yi <<= 1
            yf *= 2
            zi <<= 1
            zf *= 2

            if xf >= 1.0:
                xi += 1
                xf -= 1
            if yf >= 1.0:
                yi += 1
                yf -= 1
            if zf >= 1.0:
                zi += 1
                zf -= 1

        return float(r)

    def sample_grid(self, x, y=0, z=0):
        """Vectorized ``sample`` over broadcastable coordinate arrays.

        Args:
            x, y, z: Scalars or numpy arrays; broadcast against each other.

        Returns:
            Float64 array of the broadcast shape.
        """
        self._ensure_lattice()
        p = self._perlin

        x, y, z = np.broadcast_arrays(
            np.abs(np.asarray(x, dtype=np.float64)),
            np.abs(np.asarray(y, dtype=np.float64)),
            np.abs(np.asarray(z, dtype=np.float64)),
        )

        xi, xf = _split(x)
        yi, yf = _split(y)
        zi, zf = _split(z)

        r = np.zeros(x.shape, dtype=np.float64)
        ampl = 0.5

        for _ in range(self._octaves):
            of = xi + (yi << PERLIN_YWRAPB) + (zi << PERLIN_ZWRAPB)

            rxf = 0.5 * (1.0 - np.cos(xf * np.pi))
            ryf = 0.5 * (1.0 - np.cos(yf * np.pi))
            rzf = 0.5 * (1.0 - np.cos(zf * np.pi))

            n1 = p[of & PERLIN_SIZE]
            n1 = n1 + rxf * (p[(of + 1) & PERLIN_SIZE] - n1)
            n2 = p[(of + PERLIN_YWRAP) & PERLIN_SIZE]
            n2 = n2 + rxf * (p[(of + PERLIN_YWRAP + 1) & PERLIN_SIZE] - n2)
            n1 = n1 + ryf * (n2 - n1)

            of = of + PERLIN_ZWRAP
            n2 = p[of & PERLIN_SIZE]
            n2 = n2 + rxf * (p[(of + 1) & PERLIN_SIZE] - n2)
            n3 = p[(of + PERLIN_YWRAP) & PERLIN_SIZE]
            n3 = n3 + rxf * (p[(of + PERLIN_YWRAP + 1) & PERLIN_SIZE] - n3)
            n2 = n2 + ryf * (n3 - n2)

            n1 = n1 + rzf * (n2 - n1)

            r += n1 * ampl
            ampl *= self._falloff

            xi, xf = _double(xi, xf)
            yi, yf = _double(yi, yf)
            zi, zf = _double(zi, zf)

        return r


def _split(v):
    """Split coordinates into int64 cell indices and fractions in [0, 1).

    Cells are reduced modulo 2**32 so huge coordinates fit in int64. Only
    the low 12 bits of a cell ever reach the lattice, so this is lossless.
    """
    cell = np.floor(v)
    return np.fmod(cell, 2.0 ** 32).astype(np.int64), v - cell


def _double(cell, frac):
    """Advance one octave: double cell and fraction, carrying overflow."""
    cell = cell << 1
    frac = frac * 2
    carry = frac >= 1.0
    return np.where(carry, cell + 1, cell), np.where(carry, frac - 1, frac)
