"""Shared-secret check for the analysis endpoint."""

import hmac

from palette_api.core.exceptions import AuthError


def verify_api_key(supplied: str | None, expected: str) -> bool:
    """Compare the caller's key with the server secret, byte for byte.

    An unset server secret never matches, so a misconfigured deployment
    rejects every request instead of accepting a missing key.
    """
    if not expected or supplied is None:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def require_api_key(supplied: str | None, expected: str) -> None:
    """Raise AuthError unless the supplied key matches."""
    if not verify_api_key(supplied, expected):
        raise AuthError()
