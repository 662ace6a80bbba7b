"""Translate driver failures into StoreUnavailable."""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

import psycopg

from eoriauthz.domain.exceptions import StoreUnavailable

P = ParamSpec("P")
T = TypeVar("T")


def translate_store_errors(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    """Re-raise psycopg errors (pool timeouts included) as StoreUnavailable."""

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return await func(*args, **kwargs)
        except psycopg.Error as e:
            raise StoreUnavailable(f"{func.__qualname__}: {e}") from e

    return wrapper
