"""
Presentation Layer

Command handling, pagination and export for the chat surface.
"""
