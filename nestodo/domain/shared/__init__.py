"""Shared domain building blocks.

Example usage:
    >>> from nestodo.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def require_title(title: str) -> Result[str, str]:
    ...     if not title.strip():
    ...         return Err("Title cannot be empty")
    ...     return Ok(title.strip())
"""

from nestodo.domain.shared.result import Err, Ok, Result, is_err, is_ok

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
