"""A bouncing-ball paddle game: display-free rules in ``game``, a Tk window in ``app``."""

__version__ = "0.1.0"
__all__ = ["__version__"]