"""railway: railway-oriented programming helpers for Python.

Option, Result, Async and AsyncResult wrap a value and skip the remaining
steps of a chain once a value is missing or an operation has failed.

Flat imports (preferred):
    from railway import Option, Result, Async, AsyncResult
    from railway import pipe, compute, safe, safe_async

Submodule imports (for organization):
    from railway.option import Option
    from railway.result import Result
    from railway.async_ import Async, AsyncResult
    from railway.compose import pipe, compute
"""

# Configuration
from railway._config import RailwayConfig, get_config, init

# Async
from railway.async_ import Async, AsyncResult

# Composition
from railway.compose import Pipe, compute, pipe

# Decorators
from railway.decorators import safe, safe_async

# Errors
from railway.errors import (
    EmptyValueAccessError,
    InvalidArgumentError,
    RailwayError,
    ResultStateMismatchError,
)

# Types
from railway.option import Option
from railway.result import Result, ResultKind

__all__ = [
    'Async',
    'AsyncResult',
    'EmptyValueAccessError',
    'InvalidArgumentError',
    'Option',
    'Pipe',
    'RailwayConfig',
    'RailwayError',
    'Result',
    'ResultKind',
    'ResultStateMismatchError',
    'compute',
    'get_config',
    'init',
    'pipe',
    'safe',
    'safe_async',
]

__version__ = '2.0.0'
