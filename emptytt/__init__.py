"""Minimal SMPTE ST 428-7 subtitle document and track file generator."""

__version__ = "0.1.0"
