"""
Service layer - Catalog search orchestration.
"""
