"""Read 24-bit BMP images and write filtered copies, such as grayscale."""

__version__ = "0.1.0"
__all__ = ["bitmap", "filters", "cli"]