"""Atari Lynx emulator parts: Suzy math unit, sprite line decoder, boot ROM, colour packing, settings and checksums."""

__version__ = "0.1.0"