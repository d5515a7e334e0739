"""A small textured raycasting first-person maze walker with a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]