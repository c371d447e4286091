"""Presence checks for request payloads."""

from __future__ import annotations

from typing import Any, Mapping

from hrdesk.common.exceptions import MissingParameterError


def is_blank(value: Any) -> bool:
    """True for ``None`` and empty / whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_falsy(value: Any) -> bool:
    """Legacy client check: anything falsy (including ``0``) counts as absent."""
    return is_blank(value) or not value


def require_fields(
    payload: Mapping[str, Any],
    *names: str,
    detail: str = "Missing required fields",
    falsy_is_missing: bool = False,
) -> None:
    """Raise ``MissingParameterError`` listing every required field that is absent."""
    check = is_falsy if falsy_is_missing else is_blank
    missing = [name for name in names if check(payload.get(name))]
    if missing:
        raise MissingParameterError(missing, detail=detail)
