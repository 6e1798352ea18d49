"""
catgql: a small GraphQL-over-HTTP service for an in-memory cat catalog.
"""

__version__ = "0.1.0"
