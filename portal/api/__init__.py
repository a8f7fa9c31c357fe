"""HTTP API for the student registry."""
