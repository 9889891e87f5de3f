"""Arcade game menu: a windowed game selector rendered on a character grid."""

__version__ = "1.0.0"
