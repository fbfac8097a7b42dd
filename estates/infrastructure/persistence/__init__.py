"""Persistence: database engine, ORM models, repositories and unit of work."""
