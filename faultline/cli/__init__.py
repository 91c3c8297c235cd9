"""Faultline command-line interface package."""
