"""
Boundary adapters for external services.
"""
