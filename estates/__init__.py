"""Estates platform backend: rental and construction services plus gateway."""
