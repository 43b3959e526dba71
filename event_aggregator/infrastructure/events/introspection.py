"""Callable introspection helpers shared by handler records and auto-wiring."""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, get_origin

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_NO_RESULT = (inspect.Signature.empty, None, type(None))


def get_signature(fn: Callable[..., Any]) -> inspect.Signature:
    """Return the signature of fn with string annotations resolved.

    If any annotation fails to evaluate (an undefined name or a missing module
    attribute, for example) all are left as strings for the callers to check.

    Raises:
        TypeError: If fn is not callable.
        ValueError: If no signature can be provided for fn.
    """
    signature = inspect.signature(fn)
    try:
        return inspect.signature(fn, eval_str=True)
    except Exception:
        return signature


def single_positional_parameter(signature: inspect.Signature) -> inspect.Parameter | None:
    """Return the only parameter of signature, or None if there isn't exactly one positional one."""
    parameters = list(signature.parameters.values())
    if len(parameters) != 1 or parameters[0].kind not in _POSITIONAL_KINDS:
        return None
    return parameters[0]


def annotation_matches(annotation: Any, event_type: type) -> bool:
    """Exact type match, tolerating unresolved string annotations by name."""
    if isinstance(annotation, str):
        return annotation in (event_type.__name__, event_type.__qualname__)
    return annotation is event_type


def is_async_callable(fn: Callable[..., Any]) -> bool:
    """True for coroutine functions, including objects with an async __call__."""
    if inspect.iscoroutinefunction(fn):
        return True
    return inspect.iscoroutinefunction(getattr(fn, "__call__", None))


def is_awaitable_annotation(annotation: Any) -> bool:
    """True if annotation names an awaitable type (Awaitable[...], Coroutine[...], Future...)."""
    origin = get_origin(annotation) or annotation
    return isinstance(origin, type) and issubclass(origin, Awaitable)


def returns_nothing(signature: inspect.Signature) -> bool:
    """True if the return annotation is absent or None."""
    return signature.return_annotation in _NO_RESULT


def describe(obj: Any) -> str:
    """Readable name for a callable or type, used in messages and logs."""
    return getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None) or repr(obj)
