"""zyfetch - a tiny system information fetch tool."""

__version__ = "0.1.0"
