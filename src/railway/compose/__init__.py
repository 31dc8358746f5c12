"""Composition utilities: pipe() chains and compute() blocks."""

from railway.compose.compute import compute
from railway.compose.pipe import Pipe, pipe

__all__ = [
    'Pipe',
    'compute',
    'pipe',
]
