"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Core wrapper types are importable from the package root."""
    from railway import Async, AsyncResult, Option, Result, ResultKind

    assert Option.of_some(1).is_some()
    assert Result.of_value(1).is_ok()
    assert ResultKind.OK.value == 'ok'
    assert Async is not None
    assert AsyncResult is not None


def test_import_composition():
    """pipe and compute are importable and usable."""
    from railway import Pipe, compute, pipe

    assert isinstance(pipe(1), Pipe)
    assert compute(lambda: 1) == 1


def test_import_decorators():
    """The decorators are importable."""
    from railway import safe, safe_async

    assert callable(safe)
    assert callable(safe_async)


def test_import_errors():
    """The error hierarchy is importable."""
    from railway import EmptyValueAccessError, InvalidArgumentError, RailwayError, ResultStateMismatchError

    assert issubclass(EmptyValueAccessError, RailwayError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(ResultStateMismatchError, RailwayError)


def test_submodule_imports():
    """Submodules expose their public names."""
    from railway.async_ import Async, AsyncResult
    from railway.compose import compute, pipe
    from railway.option import Option
    from railway.result import Result

    assert all(x is not None for x in (Async, AsyncResult, compute, pipe, Option, Result))


def test_version():
    """The package carries a version string."""
    import railway

    assert railway.__version__ == '2.0.0'
