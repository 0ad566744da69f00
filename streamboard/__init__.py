"""Score gateway for on-chain data streams."""

__version__ = "0.1.0"
