"""Internal building blocks shared by the wrapper types."""

from railway._internal.once import Once
from railway._internal.pointfree import pointfree

__all__ = ['Once', 'pointfree']
