"""Visitor identity resolution from request signals."""

import re

from app.models.stats import GUEST_USER_ID, VisitorIdentity

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def sanitize(value: str | None) -> str:
    """Strip control characters and surrounding whitespace."""
    if not value:
        return ""
    return _CONTROL_CHARS.sub("", value).strip()


def normalize_user_id(user_id: int | None) -> int:
    """Missing or zero user ids collapse to the guest sentinel."""
    return user_id if user_id else GUEST_USER_ID


def resolve_ip(
    forwarded_for: str | None = None,
    client_ip: str | None = None,
    remote_addr: str | None = None,
) -> str:
    """Pick the visitor address: first X-Forwarded-For hop, then Client-IP, then the socket peer.

    Only the first comma-separated forwarded hop is considered. When it is empty
    after sanitizing, resolution falls through to Client-IP rather than storing
    an empty address.
    """
    candidates = []
    if forwarded_for:
        candidates.append(forwarded_for.split(",")[0])
    candidates.extend([client_ip, remote_addr])

    for candidate in candidates:
        ip = sanitize(candidate)
        if ip:
            return ip
    return ""


def resolve_identity(
    user_id: int | None = None,
    forwarded_for: str | None = None,
    client_ip: str | None = None,
    remote_addr: str | None = None,
) -> VisitorIdentity:
    """Build the (user_id, ip_address) deduplication identity."""
    return VisitorIdentity(
        user_id=normalize_user_id(user_id),
        ip_address=resolve_ip(forwarded_for, client_ip, remote_addr),
    )
