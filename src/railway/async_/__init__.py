"""Async utilities: Async and AsyncResult wrappers over awaitables."""

from railway.async_.result import AsyncResult
from railway.async_.value import Async

__all__ = ['Async', 'AsyncResult']
