"""Uniform random sampling of arbitrarily large integers, in randbig.sampling."""

__version__ = "0.1.0"
__all__ = ["sampling"]