"""
Infrastructure layer package for the Plant Medicine API.
Provides the MongoDB connection and external API clients.
"""

__all__ = []
