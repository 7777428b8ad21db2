"""Rules and reports that score machine-generated slop patterns in Python code and prose."""

__version__ = "0.2.0"