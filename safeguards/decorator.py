# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# safeguards/decorator.py

import functools
import inspect
from typing import Any, Callable, Optional

from .sanitization import sanitize_output_string


def _sanitize_return(value: Any, preserve_line_feeds: bool) -> Any:
    if isinstance(value, str):
        return sanitize_output_string(value, preserve_line_feeds)
    return value


def sanitized_output(
    func: Optional[Callable] = None,
    *,
    preserve_line_feeds: bool = False,
):
    """
    Run a function's string return value through output sanitization.

    Works on plain and ``async`` functions. Non-string return values pass
    through untouched.

    :param preserve_line_feeds: Optional. Keep tab, LF and CR characters in
                                the sanitized result. Defaults to False.

    .. code-block:: python

        from safeguards import sanitized_output

        # Bare form
        @sanitized_output
        def describe(user): ...

        # With options, keeping multi-line output intact
        @sanitized_output(preserve_line_feeds=True)
        async def render_report(): ...
    """

    def decorator(fn: Callable):
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs):
                """Wrapper for asynchronous functions."""
                return _sanitize_return(await fn(*args, **kwargs), preserve_line_feeds)

            return async_wrapper

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous functions."""
            return _sanitize_return(fn(*args, **kwargs), preserve_line_feeds)

        return sync_wrapper

    # Dual-syntax support (@sanitized_output vs @sanitized_output(...))
    if func is not None and callable(func):
        return decorator(func)
    return decorator
