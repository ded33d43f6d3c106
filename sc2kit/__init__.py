"""Game launching, replay discovery and map analysis helpers for StarCraft II bots."""

__version__ = "0.1.0"