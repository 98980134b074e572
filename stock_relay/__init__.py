"""Stock Relay: latest TWSE daily quote over HTTP."""

__version__ = "1.0.0"
