"""
Application Layer

Services implementing the recommendation pipeline.
"""
