"""Grid-map raycasting engine for .cub scenes with XPM textures and BMP screenshots."""

__version__ = "0.1.0"