"""Noise field rendering.

Samples a ``Noise`` engine over a pixel grid and maps the values onto a
two-color ramp.
"""

import logging
from dataclasses import dataclass

import numpy as np
from PIL import Image

from .noise import Noise, DEFAULT_OCTAVES, DEFAULT_FALLOFF

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Configuration for noise rendering."""

    # Sampling
    scale: float = 0.02
    offset: tuple = (0.0, 0.0)
    z: float = 0.0

    # Detail
    octaves: int = DEFAULT_OCTAVES
    falloff: float = DEFAULT_FALLOFF

    # Color ramp
    low_color: tuple = (0, 0, 0)
    high_color: tuple = (255, 255, 255)


def render(width, height, seed=None, config=None, noise=None):
    """Render a noise field as an image.

    Args:
        width: Output width in pixels.
        height: Output height in pixels.
        seed: Lattice seed for reproducible output. If None the engine's
            current lattice is used (a fresh random one for a new engine).
        config: RenderConfig instance (defaults used if None).
        noise: Existing Noise engine to sample. Its detail settings are
            overwritten by the config.

    Returns:
        PIL Image in RGB mode.
    """
    if config is None:
        config = RenderConfig()
    if noise is None:
        noise = Noise()

    width = max(1, int(width))
    height = max(1, int(height))

    if seed is not None:
        noise.reseed(seed)
    noise.configure_detail(config.octaves, config.falloff)

    logger.debug(
        f"Rendering {width}x{height} noise field "
        f"(scale={config.scale}, octaves={noise.octaves}, falloff={noise.falloff})"
    )

    # --- Pipeline ---

    # 1. Sample the field
    field = sample_field(noise, width, height, config)

    # 2. Normalize to the ramp range
    field = np.clip(field, 0.0, 1.0)

    # 3. Colorize
    rgb = _apply_ramp(field, config.low_color, config.high_color)

    return Image.fromarray(rgb)


def sample_field(noise, width, height, config):
    """Sample ``noise`` at every pixel of a width x height grid.

    Returns:
        Array of shape (height, width).
    """
    ox, oy = config.offset
    xs = (ox + np.arange(width)) * config.scale
    ys = (oy + np.arange(height)) * config.scale
    xm, ym = np.meshgrid(xs, ys, indexing='xy')
    return noise.sample_grid(xm, ym, config.z)


def _apply_ramp(field, low_color, high_color):
    """Blend two RGB colors by a [0, 1] field into a uint8 image array."""
    low = np.asarray(low_color, dtype=np.float64)
    high = np.asarray(high_color, dtype=np.float64)
    rgb = low + field[..., None] * (high - low)
    return np.clip(np.round(rgb), 0, 255).astype(np.uint8)
