"""Screen-independent building blocks for a terminal database viewer."""

__version__ = "0.1.0"