"""Keyboard and mouse decoding for the terminal UI."""

from .reader import read_key

__all__ = ["read_key"]
