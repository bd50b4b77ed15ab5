"""Crafting domain."""
