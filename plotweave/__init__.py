"""Colors, styles, drawable elements and data series for composing plots."""

__version__ = "0.1.0"