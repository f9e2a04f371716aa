"""Building blocks for slicing log lines by time range and pattern."""

__version__ = "0.1.0"