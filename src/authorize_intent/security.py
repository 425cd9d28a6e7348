"""Security functions for authorization requests.

Covers the security-sensitive values of an authorize request (the
anti-CSRF state and the PKCE verifier/challenge pair) and URL checks
for the authorization endpoint a request is rendered against.
"""

import logging
import secrets
from typing import Any, Callable
from urllib.parse import urlparse

import validators
from authlib.common.encoding import to_bytes, to_unicode, urlsafe_b64encode

from .exceptions import SecurityError
from .models import ProofKeyForCodeExchange
from .params import CodeChallengeMethod

logger = logging.getLogger(__name__)

# Number of random bytes behind a generated state (43 encoded characters)
STATE_BYTE_LENGTH = 32

# RFC 7636 requires 43 to 128 characters; 32 bytes encode to 43
CODE_VERIFIER_BYTE_LENGTH = 32

# hashlib digest names with a registered RFC 7636 method
_CHALLENGE_METHODS = {
    "sha256": CodeChallengeMethod.S256.value,
}


def random_bytes(length: int) -> bytes:
    """Return ``length`` cryptographically random bytes."""
    return secrets.token_bytes(length)


def encode_token(value) -> str:
    """Encode bytes or text as URL-safe base64 without padding.

    Args:
        value: Raw bytes, or a string which is encoded as UTF-8 first;
            characters UTF-8 cannot represent become "?"

    Returns:
        The encoded token as a string
    """
    return to_unicode(urlsafe_b64encode(to_bytes(value, errors="replace")))


def generate_state() -> str:
    """
    Generate a secure random state value for an authorization request.

    Returns:
        A URL-safe, unpadded encoding of ``STATE_BYTE_LENGTH`` random bytes
    """
    state = encode_token(random_bytes(STATE_BYTE_LENGTH))
    logger.debug("Generated state parameter (%d characters)", len(state))
    return state


def generate_code_verifier() -> str:
    """Generate a PKCE code verifier from fresh random bytes."""
    return encode_token(random_bytes(CODE_VERIFIER_BYTE_LENGTH))


def challenge_method(digest_name: str) -> str:
    """Map a hashlib digest name to its code_challenge_method value."""
    return _CHALLENGE_METHODS.get(digest_name.lower(), digest_name.upper())


def create_proof_key(digest: Callable[[bytes], Any]) -> ProofKeyForCodeExchange:
    """
    Create a PKCE verifier and derive its challenge with ``digest``.

    Args:
        digest: A hashlib-style constructor such as ``hashlib.sha256``

    Returns:
        The verifier, its challenge and the challenge method
    """
    code_verifier = generate_code_verifier()
    hashed = digest(code_verifier.encode("ascii"))
    code_challenge = encode_token(hashed.digest())

    logger.info("Generated code_challenge (%d characters)", len(code_challenge))
    return ProofKeyForCodeExchange(
        code_verifier=code_verifier,
        code_challenge=code_challenge,
        code_challenge_method=challenge_method(hashed.name),
    )


def validate_scheme(scheme: str) -> bool:
    return scheme == "https"


def valid_url(url: str) -> None:
    """
    Validate that a URL is safe to send an authorization request to.

    Args:
        url: The URL to validate

    Raises:
        SecurityError: If the URL is malformed, not HTTPS, or carries
            credentials
    """
    if not validators.url(url, validate_scheme=validate_scheme):
        error_msg = f"Rejected authorization endpoint URL: {url}"
        logger.error(error_msg)
        raise SecurityError(error_msg)

    url_parts = urlparse(url)
    if url_parts.username or url_parts.password:
        error_msg = "Rejected authorization endpoint URL with embedded credentials"
        logger.error(error_msg)
        raise SecurityError(error_msg)
