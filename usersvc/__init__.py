"""
usersvc package initializer.
"""

from . import client
from . import pipeline
from . import storage

__all__ = ["client", "pipeline", "storage"]
