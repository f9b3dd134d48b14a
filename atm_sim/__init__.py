"""In-memory ATM simulation backed by a pluggable bank service."""

__version__ = "0.1.0"
