"""Display models and formatting helpers for signal-analysis widgets."""

__version__ = "0.3.0"