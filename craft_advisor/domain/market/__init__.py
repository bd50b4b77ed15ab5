"""Market domain."""
