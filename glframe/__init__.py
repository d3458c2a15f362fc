"""Colours, regions, translation helpers, log formatting, settings defaults and edit handles for a small UI framework."""

__version__ = "0.1.0"
__all__ = ["base", "lang", "log", "config_items", "editing"]