"""Translate configuration errors into a generic payment failure.

End users only ever see ``PaymentUnavailable.public_message``; the field
name of the underlying ``ConfigError`` is logged for operators.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Callable, TypeVar

from pawgate.gateway.errors import ConfigError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)

PUBLIC_MESSAGE = "Payment is temporarily unavailable"


class PaymentUnavailable(Exception):
    public_message = PUBLIC_MESSAGE

    def __init__(self) -> None:
        super().__init__(PUBLIC_MESSAGE)


@contextmanager
def config_error_guard(operation: str = "payment") -> Iterator[None]:
    try:
        yield
    except ConfigError as exc:
        logger.error(
            "Payment configuration error during %s: field=%s (%s)",
            operation,
            exc.field,
            type(exc).__name__,
        )
        raise PaymentUnavailable() from exc


def payment_unavailable_on_config_error(func: F) -> F:
    """Decorator form of ``config_error_guard`` for request handlers."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with config_error_guard(func.__name__):
            return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
