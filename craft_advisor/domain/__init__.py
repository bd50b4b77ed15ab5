"""
Domain Layer

Value objects for crafting and market data.
"""
