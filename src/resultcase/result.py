"""Success/Failure result algebra for value-based error handling.

A Result is either a Success carrying a value or a Failure carrying an
error. Combinators inspect, transform and chain results without raising:
- Inspection: get_or_throw, get_or_else, if_success, if_failure, match
- Functor: map, map_error
- Monad: flat_map (bind)
- Boundaries: try_catch (raise -> Failure), get_or_throw (Failure -> raise)

Example:
    >>> result = (
    ...     success(10)
    ...     .map(lambda x: x + 1)
    ...     .flat_map(lambda x: success(x) if x > 0 else failure("neg"))
    ... )
    >>> result.get_or_throw()
    11
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import wraps
from typing import TYPE_CHECKING, Callable, ClassVar, Generic, Never, ParamSpec, TypeAlias, TypeVar, Union, overload

from .config import get_settings
from .errors import FailureError
from .observability import BoundLogger, get_logger

if TYPE_CHECKING:
    from typing import NoReturn

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type
P = ParamSpec("P")


# ═════════════════════════════════════════════════════════════════════════════
# Variants
# ═════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True, repr=False, match_args=False)
class Success(Generic[T]):
    """Success variant. Holds `value`; `error` is always None.

    Examples:
        >>> Success(42).map(lambda x: x * 2).value
        84
        >>> Success(42).map_error(str).value
        42
    """

    value: T

    is_success: ClassVar[bool] = True
    is_failure: ClassVar[bool] = False

    @property
    def error(self) -> None:
        """Unused slot on Success."""
        return None

    # ─── Inspection ─────────────────────────────────────────────────────

    def get_or_throw(self) -> T:
        """Return the wrapped value."""
        return self.value

    def get_or_else(self, default: object) -> T:
        """Return the wrapped value; default is ignored."""
        return self.value

    def if_success(self, f: Callable[[T], U]) -> U:
        """Apply f to the value and return its output."""
        return f(self.value)

    def if_failure(self, f: Callable[[Never], object]) -> None:
        """No-op on Success: f is never called."""
        return None

    def match(self, f: Callable[[T], U], g: Callable[[Never], object]) -> U:
        """Exhaustive eliminator. Calls only f, with the value."""
        return f(self.value)

    # ─── Functor Operations ─────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Success[U]:
        """Wrap f(value) in a new Success. Exceptions from f propagate."""
        return Success(f(self.value))

    def map_error(self, f: Callable[[Never], object]) -> Success[T]:
        """No-op on Success: returns this same instance."""
        return self

    # ─── Monad Operations ───────────────────────────────────────────────

    @overload
    def flat_map(self, f: Callable[[T], Success[U]]) -> Success[U]: ...
    @overload
    def flat_map(self, f: Callable[[T], Failure[F]]) -> Failure[F]: ...
    @overload
    def flat_map(self, f: Callable[[T], Result[U, F]]) -> Result[U, F]: ...

    def flat_map(self, f: Callable[[T], Result[U, F]]) -> Result[U, F]:
        """Monadic bind (>>=). Returns f(value) as-is, without re-wrapping.

        Example:
            >>> Success("42").flat_map(lambda s: Success(int(s))).value
            42
        """
        return f(self.value)

    # ─── Dunder Methods ─────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True, repr=False, match_args=False)
class Failure(Generic[E]):
    """Failure variant. Holds `error`; `value` is always None.

    Examples:
        >>> Failure("io").map(lambda x: x * 2).error
        'io'
        >>> Failure("io").map_error(str.upper).error
        'IO'
    """

    error: E

    is_success: ClassVar[bool] = False
    is_failure: ClassVar[bool] = True

    @property
    def value(self) -> None:
        """Unused slot on Failure."""
        return None

    # ─── Inspection ─────────────────────────────────────────────────────

    def get_or_throw(self) -> NoReturn:
        """Raise the wrapped error.

        Exception payloads are raised as-is. Anything else is raised
        inside a FailureError whose `.error` is the original payload.

        Raises:
            BaseException: The stored exception instance
            FailureError: If the payload is not an exception
        """
        if log := _event_logger("log_raised"):
            log.debug("failure raised", error_type=type(self.error).__name__)
        if isinstance(self.error, BaseException):
            raise self.error
        raise FailureError(self.error)

    def get_or_else(self, default: U) -> U:
        """Return default instead of raising."""
        return default

    def if_success(self, f: Callable[[Never], object]) -> None:
        """No-op on Failure: f is never called."""
        return None

    def if_failure(self, f: Callable[[E], F]) -> F:
        """Apply f to the error and return its output."""
        return f(self.error)

    def match(self, f: Callable[[Never], object], g: Callable[[E], F]) -> F:
        """Exhaustive eliminator. Calls only g, with the error."""
        return g(self.error)

    # ─── Functor Operations ─────────────────────────────────────────────

    def map(self, f: Callable[[Never], object]) -> Failure[E]:
        """No-op on Failure: returns this same instance."""
        return self

    def map_error(self, f: Callable[[E], F]) -> Failure[F]:
        """Wrap f(error) in a new Failure. Exceptions from f propagate."""
        return Failure(f(self.error))

    # ─── Monad Operations ───────────────────────────────────────────────

    def flat_map(self, f: Callable[[Never], object]) -> Failure[E]:
        """Short-circuit: returns this same instance, f is never called."""
        return self

    # ─── Dunder Methods ─────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Both parameters are required: Result[int, str]. The error channel has no
# default, so results built by try_catch are spelled Result[T, Exception].
Result: TypeAlias = Union[Success[T], Failure[E]]


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Success[T]:
    """Construct the Success variant."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Construct the Failure variant."""
    return Failure(error)


def try_catch(f: Callable[[], T]) -> Result[T, Exception]:
    """Run f, converting a normal return to Success and a raise to Failure.

    Every Exception raised by f is captured, regardless of type. Interpreter
    signals (KeyboardInterrupt, SystemExit) are not Exceptions and propagate.

    Example:
        >>> try_catch(lambda: 42)
        Success(42)
        >>> try_catch(lambda: int("x")).is_failure
        True
    """
    return _capture(f, getattr(f, "__qualname__", repr(f)))


def _capture(f: Callable[[], T], label: str) -> Result[T, Exception]:
    try:
        return Success(f())
    except Exception as e:
        if log := _event_logger("log_captured"):
            log.bind(function=label).debug(
                "computation captured", error_type=type(e).__name__, error=_describe(e),
            )
        return Failure(e)


def result_of(func: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """Decorator: calls go through try_catch and return a Result.

    Example:
        >>> @result_of
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("7")
        Success(7)
        >>> parse("x").is_failure
        True
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return _capture(lambda: func(*args, **kwargs), func.__qualname__)

    return wrapper


# ═════════════════════════════════════════════════════════════════════════════
# Log Events
# ═════════════════════════════════════════════════════════════════════════════


def _event_logger(flag: str) -> BoundLogger | None:
    """Logger for an optional debug event, or None when it would be dropped.

    Unreadable or invalid settings disable the event; they never replace the
    Result being built or the error being raised.
    """
    try:
        if not getattr(get_settings(), flag):
            return None
        log = get_logger(__name__)
    except (ValueError, OSError):
        return None
    return log if log.is_enabled_for(logging.DEBUG) else None


def _describe(error: BaseException) -> str:
    """str(error), or a placeholder when the exception cannot render itself."""
    try:
        return str(error)
    except Exception:
        return f"<exception str() failed: {type(error).__name__}>"
