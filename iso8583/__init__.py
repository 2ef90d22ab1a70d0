"""Field encoders, bitmaps, message type indicators and display helpers for ISO 8583 messages."""

__version__ = "0.1.0"