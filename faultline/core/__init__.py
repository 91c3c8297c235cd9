"""Core models, errors and constants."""
