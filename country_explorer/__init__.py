"""Global Country Explorer: search and display country data from REST Countries."""

__version__ = "1.0.0"
