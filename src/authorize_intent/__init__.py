"""Authorize intent builder for OAuth 2.0 / OpenID Connect.

This package assembles the parameters of an authorize request and wraps
them in an intent addressed to the component that performs the
authorization exchange. It handles:

- Default parameters (the ``openid`` scope, a random state)
- Scope, ACR and prompt normalization
- PKCE verifier and challenge generation
- Result callbacks (success, failure, completion, cancellation)
- Rendering a request as an authorization endpoint URL

Example usage:
    >>> import hashlib
    >>> import authorize_intent
    >>> intent = authorize_intent.AuthorizeIntentBuilder(
    ...     "com.example.app", "client-id", hashlib.sha256, "myapp://callback"
    ... ).build()
    >>> intent.request.scope
    'openid'
"""

import logging

from .builder import AuthorizeIntentBuilder, UNSET, join_values
from .callbacks import AuthorizationCallbacks, CallbackHandles
from .models import (
    AUTHORIZATION_COMPONENT,
    AuthorizationRequest,
    AuthorizeIntent,
    ProofKeyForCodeExchange,
)
from .params import ACR, DEFAULT_SCOPES, CodeChallengeMethod, Prompt, Scope
from .security import create_proof_key, encode_token, generate_state, valid_url
from .utils import build_authorize_url
from .exceptions import (
    AuthorizeIntentError,
    InvalidParameterError,
    SecurityError,
)

# Set up null handler to prevent "No handler found" warnings
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version information
__version__ = "0.1.0"


__all__ = [
    # Core functionality
    "AuthorizeIntentBuilder",
    "AuthorizeIntent",
    "AuthorizationRequest",
    "ProofKeyForCodeExchange",
    "AuthorizationCallbacks",
    "CallbackHandles",
    "AUTHORIZATION_COMPONENT",
    "UNSET",
    "join_values",
    "build_authorize_url",
    # Parameters
    "Scope",
    "ACR",
    "Prompt",
    "CodeChallengeMethod",
    "DEFAULT_SCOPES",
    # Security
    "generate_state",
    "encode_token",
    "create_proof_key",
    "valid_url",
    # Exceptions
    "AuthorizeIntentError",
    "InvalidParameterError",
    "SecurityError",
]
