"""Faultline: failure propagation simulator."""

__version__ = "0.1.0"
