"""Infrastructure Layer - in-memory storage and cross-cutting concerns (logging).
"""
