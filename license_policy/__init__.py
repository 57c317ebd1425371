"""License policy checking for third-party dependencies."""

__version__ = "0.1.0"
