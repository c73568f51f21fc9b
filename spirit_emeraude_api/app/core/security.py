"""
Bearer authentication for the admin surface.

Authentication proper (issuing tokens, storing them client side,
refreshing profiles) belongs to an external service; this API only
checks that an admin request carries a credential it trusts.  Two
kinds of credentials are accepted:

* a JSON Web Token signed with HMAC-SHA256 and ``settings.secret_key``
  whose payload carries ``"role": "admin"``;
* one of the static tokens listed in ``settings.admin_tokens``.

Tokens are implemented with base64url encoding and ``hmac`` from the
standard library, which is enough for the shared-secret setup used
between the storefront and the content API.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, object], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field holding the
    expiration time as a UNIX timestamp.  Clients send the token in the
    ``Authorization`` header as ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "admin", "role": "admin"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.
    """
    to_encode = dict(data)
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, object]]:
    """Verify and decode a JWT token.

    Returns the payload when the signature matches and the token has
    not expired, ``None`` otherwise.  Malformed tokens are treated as
    invalid rather than raising.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        expected_sig = _sign(signing_input, settings.secret_key)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    try:
        if data.get("exp") is None or int(data["exp"]) < int(time.time()):
            return None
    except (TypeError, ValueError):
        return None
    return data


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, object]:
    """Dependency that returns the claims of the authenticated caller.

    Raises HTTP 401 when the ``Authorization`` header is missing or the
    token is neither a configured static token nor a valid JWT.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = credentials.credentials

    # Static tokens bypass JWT decoding and are always administrators.
    if token in settings.admin_token_list():
        return {"sub": "static_admin", "role": ADMIN_ROLE}

    payload = decode_access_token(token)
    if not payload:
        logger.info("Rejected invalid or expired bearer token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload


def require_roles(*roles: str) -> Callable[..., Dict[str, object]]:
    """Dependency factory enforcing that the caller has one of ``roles``.

    Use via ``Depends(require_roles("admin"))``.  Raises HTTP 403 when
    the authenticated caller's ``role`` claim is not listed.
    """

    def _role_dependency(current_user: Dict[str, object] = Depends(get_current_user)) -> Dict[str, object]:
        if current_user.get("role") not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _role_dependency


require_admin = require_roles(ADMIN_ROLE)
