"""
Domain layer - Core catalog entities and domain errors.

This layer contains the fundamental business objects and rules,
independent of any infrastructure or framework concerns.
"""
