"""burstpace - two-phase bandwidth throttling for file downloads."""

__version__ = "0.1.0"
