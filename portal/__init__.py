"""Portal: access-controlled registry of student records.

A single owner registers, updates and soft-deletes student records;
anyone may read them. Every successful change is announced as an event.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
