"""Decorators returning railway types: @safe and @safe_async."""

from railway.decorators.safe import safe, safe_async

__all__ = ['safe', 'safe_async']
