"""Serialization, CRC-32/MPEG-2, command headers, time helpers, communication helpers, simulated GPIO and publish/subscribe topics for on-board computer software."""

__version__ = "0.1.0"