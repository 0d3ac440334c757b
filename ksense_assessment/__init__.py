"""Patient risk assessment client for the KSense healthcare API."""

__version__ = "0.1.0"
