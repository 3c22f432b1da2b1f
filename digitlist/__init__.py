"""Numbers held as sequences of digit cells, with tools to rearrange and draw them."""

__version__ = "0.1.0"
__all__ = ["__version__"]