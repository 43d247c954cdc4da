"""Place three points on a grayscale canvas and draw the circle through them."""

__version__ = "0.1.0"
__all__ = ["__version__"]