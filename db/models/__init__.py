"""
Model package exports.

Import all SQLAlchemy models here so metadata registration works without
extra imports.
"""

from db.models.actor import Actor

__all__ = [
    "Actor",
]
