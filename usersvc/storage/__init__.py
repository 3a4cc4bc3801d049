"""
User store package: interface, in-memory store, swap handle and seed factory.
"""

from .base import BaseUserStore
from .handle import StoreHandle
from .storage import UserStore

__all__ = ["BaseUserStore", "StoreHandle", "UserStore"]
