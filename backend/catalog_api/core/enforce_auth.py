"""API Key Enforcement - pure shared-secret check.

Invariants:
    - Allowed iff the supplied value is present and equals the secret exactly
    - The reason string never contains or hints at the expected value
"""

import hmac

INVALID_API_KEY = "Unauthorized: invalid or missing API key"


def check_api_key(supplied: str | None, secret: str) -> str | None:
    """Return None when allowed, otherwise the denial reason."""
    if not supplied or not secret:
        return INVALID_API_KEY
    # compare_digest: constant-time, case-sensitive
    if not hmac.compare_digest(supplied.encode(), secret.encode()):
        return INVALID_API_KEY
    return None
