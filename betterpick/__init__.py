"""Betterpick client: football leagues, clubs and player discovery."""

__version__ = "1.0.0"
