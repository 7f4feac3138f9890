"""Result type for structured error handling across pipeline stages.

Components raise typed exceptions (see ``errors``); stage boundaries convert
them into a ``Result`` so the pipeline can short-circuit on the first failure
without exception-based control flow.
"""

from typing import Any, Callable, Generic, Optional, TypedDict, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Result(TypedDict, Generic[T]):
    """Outcome of an operation that can succeed or fail.

    Attributes:
        ok: True if the operation succeeded, False if it failed
        value: The successful value (None if failed)
        error: Error message (None if succeeded)
        kind: Failure category (None if succeeded)
    """

    ok: bool
    value: Optional[T]
    error: Optional[str]
    kind: Optional[str]


def success(value: T) -> Result[T]:
    """Create a successful result.

    Args:
        value: The successful result value

    Returns:
        Result with ok=True and the value
    """
    return Result(ok=True, value=value, error=None, kind=None)


def failure(error: str, kind: str = "error") -> Result[Any]:
    """Create a failed result.

    Args:
        error: Error message describing the failure
        kind: Failure category, e.g. "transport" or "shape"

    Returns:
        Result with ok=False and the error message
    """
    return Result(ok=False, value=None, error=error, kind=kind)


def from_exception(exc: Exception) -> Result[Any]:
    """Create a failed result from an exception.

    The message is prefixed with the exception class name; the failure kind
    is taken from the exception's ``kind`` attribute when it has one.
    """
    return failure(f"{type(exc).__name__}: {exc}", getattr(exc, "kind", "error"))


def try_operation(operation: Callable[[], T]) -> Result[T]:
    """Execute an operation and return a Result.

    Args:
        operation: Zero-argument callable to execute

    Returns:
        Result with either the return value or the error
    """
    try:
        return success(operation())
    except Exception as exc:
        return from_exception(exc)


def unwrap(result: Result[T]) -> T:
    """Extract the value from a Result or raise.

    Raises:
        ValueError: If ok=False
    """
    if result["ok"]:
        return result["value"]
    raise ValueError(result["error"])


def unwrap_or(result: Result[T], default: T) -> T:
    """Extract the value from a Result or return ``default``."""
    if result["ok"]:
        return result["value"]
    return default


def map_result(result: Result[T], func: Callable[[T], U]) -> Result[U]:
    """Apply ``func`` to a successful value.

    Exceptions raised by ``func`` become a failed Result; a failed input is
    passed through with its original error.
    """
    if result["ok"]:
        return try_operation(lambda: func(result["value"]))
    return failure(result["error"], result["kind"])


def and_then(result: Result[T], func: Callable[[T], Result[U]]) -> Result[U]:
    """Chain a Result-returning step after a successful one.

    ``func`` is only called when ``result`` is ok, which gives the
    short-circuit behaviour of a multi-step pipeline.
    """
    if result["ok"]:
        return func(result["value"])
    return failure(result["error"], result["kind"])
