"""Smash & Fun - serwis rezerwacji z panelem administracyjnym."""

__version__ = "0.1.0"
