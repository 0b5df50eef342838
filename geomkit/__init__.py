"""geomkit - Noise, grid and vector primitives for 2D procedural content."""

from .noise import Noise
from .grid import Grid
from .vector import Vector, vec
from .renderer import render, RenderConfig

__version__ = "0.1.0"
__all__ = ["generate", "render", "RenderConfig", "Noise", "Grid", "Vector", "vec"]


def generate(width, height, seed=None, **kwargs):
    """Generate a noise image.

    Args:
        width: Output image width in pixels.
        height: Output image height in pixels.
        seed: Lattice seed for reproducible output.
        **kwargs: Additional RenderConfig parameters (scale, octaves,
            falloff, z, offset, low_color, high_color).

    Returns:
        PIL Image in RGB mode.
    """
    config = RenderConfig(**kwargs)
    return render(width, height, seed=seed, config=config)
