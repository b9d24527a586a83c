"""Uniform access to results of returning and callback-style callables.

Debug adapter hosts hand results back in two ways: some callables return
a value, others deliver it through a completion callback. A
ResultProducer hides the difference behind a single blocking
``produce`` call.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class HookError(Exception):
    """Base exception for adapter and enrichment hook errors."""


class ResultNotDeliveredError(HookError):
    """Raised when a callback-style callable finishes without a result."""


class ResultProducer(ABC):
    """Produces a single result from arguments, blocking until it is ready."""

    @abstractmethod
    def produce(self, *args: Any) -> Any:
        """Compute the result for the given arguments."""


class ReturningProducer(ResultProducer):
    """Adapts a callable that returns its result directly."""

    def __init__(self, func: Callable[..., Any]) -> None:
        self._func = func

    def produce(self, *args: Any) -> Any:
        return self._func(*args)


class CallbackProducer(ResultProducer):
    """Adapts a callable that delivers its result through a callback.

    The callback is passed first (``func(callback, *args)``) or last
    (``func(*args, callback)``). If the callable never invokes the
    callback but returns a value, that value is used instead.
    """

    def __init__(self, func: Callable[..., Any], *, callback_first: bool = True) -> None:
        self._func = func
        self._callback_first = callback_first

    def produce(self, *args: Any) -> Any:
        """Call the wrapped callable and return what it delivered.

        Raises:
            ResultNotDeliveredError: If the callable neither invoked the
                callback nor returned a value before returning.
        """
        delivered: list[Any] = []

        def callback(result: Any) -> None:
            delivered.append(result)

        if self._callback_first:
            returned = self._func(callback, *args)
        else:
            returned = self._func(*args, callback)

        if delivered:
            return delivered[0]
        if returned is not None:
            return returned

        name = getattr(self._func, "__qualname__", repr(self._func))
        msg = f"{name} returned without delivering a result"
        raise ResultNotDeliveredError(msg)


def as_producer(
    func: ResultProducer | Callable[..., Any] | None,
    *,
    callback_first: bool = True,
) -> ResultProducer | None:
    """Wrap a callable in a CallbackProducer unless it already is a producer.

    Args:
        func: Producer, callback-style callable, or None.
        callback_first: Position of the callback argument for plain callables.

    Returns:
        ResultProducer, or None when func is None.
    """
    if func is None or isinstance(func, ResultProducer):
        return func
    return CallbackProducer(func, callback_first=callback_first)
