"""Terminal catalogue of series, episodes and movies with ratings and running times."""

__version__ = "0.1.0"
__all__ = ["__version__"]