"""
Infrastructure Layer

Concrete caches and the pricing service client.
"""
