"""
Storefront catalog search.

Relevance-ranked product search over an in-memory catalog.
"""

__version__ = "1.0.0"
