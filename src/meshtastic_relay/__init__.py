"""Meshtastic Relay - push text into a mesh within its byte limits."""

__version__ = "0.1.0"
