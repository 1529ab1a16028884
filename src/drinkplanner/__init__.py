"""Drinkplanner: ingredient measurements for drink recipes."""

__version__ = "0.1.0"
