"""
History service — recently-viewed list maintenance.

The list is newest-first, holds no duplicate handle and never exceeds
MAX_VIEWED_HANDLES entries. These functions operate on the decoded list
only; token encoding lives in utils.viewed_handles_cookie.
"""
from typing import Iterable, List, Optional

from storefront_discovery.core.constants.history import MAX_HANDLE_LENGTH, MAX_VIEWED_HANDLES
from storefront_discovery.core.exceptions import ValidationError
from storefront_discovery.utils.params import clamp


def normalize_history(handles: Optional[Iterable[object]]) -> List[str]:
    """Re-establish the list invariants on a value read from the client."""
    seen: set[str] = set()
    result: List[str] = []
    for item in handles or []:
        if not isinstance(item, str):
            continue
        handle = item.strip()
        if not handle or handle in seen:
            continue
        seen.add(handle)
        result.append(handle)
        if len(result) == MAX_VIEWED_HANDLES:
            break
    return result


def record_view(current: Optional[List[str]], new_handle: Optional[str]) -> List[str]:
    """Move ``new_handle`` to the front of ``current`` and enforce the bound.

    Raises:
        ValidationError: ``new_handle`` is missing, blank or too long.
    """
    if not isinstance(new_handle, str) or not new_handle.strip():
        raise ValidationError("handle", "Missing handle")

    handle = new_handle.strip()
    if len(handle) > MAX_HANDLE_LENGTH:
        raise ValidationError("handle", "Handle too long")
    remaining = [h for h in (current or []) if h != handle]
    return [handle, *remaining][:MAX_VIEWED_HANDLES]


def list_history(current: Optional[List[str]], limit: int = MAX_VIEWED_HANDLES) -> List[str]:
    return list((current or [])[: clamp(limit, 1, MAX_VIEWED_HANDLES)])
