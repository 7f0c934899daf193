"""Household energy consumption tracking by room and appliance, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["appliance", "room", "house", "cli"]