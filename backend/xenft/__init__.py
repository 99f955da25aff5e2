"""XENFT Sight: decode XENFT mint info and render it as a dynamic SVG card."""

__version__ = "0.1.0"
