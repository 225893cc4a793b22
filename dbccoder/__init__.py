"""Parse CAN DBC matrices and write C frame-monitor files for a driver."""

__version__ = "2.9.0"