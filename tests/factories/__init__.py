"""Test factories for creating domain objects."""
