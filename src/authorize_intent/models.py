"""Value types produced by the authorize intent builder."""

from dataclasses import dataclass, field
from typing import Dict, Union

import httpx

from .callbacks import AuthorizationCallbacks, CallbackHandles

# Name of the component that performs the authorization exchange
AUTHORIZATION_COMPONENT = "AuthorizationRequestActivity"

RedirectUri = Union[str, httpx.URL]


@dataclass(frozen=True)
class ProofKeyForCodeExchange:
    """PKCE verifier and the challenge derived from it (RFC 7636)."""

    code_verifier: str
    code_challenge: str
    code_challenge_method: str


@dataclass(frozen=True)
class AuthorizationRequest:
    """Parameters of a single authorize request.

    List-valued parameters (``scope``, ``acr_values``, ``prompt``) are
    already serialized as space-joined strings, or ``None`` when the
    request carries no value for them.
    """

    client_id: str
    redirect_uri: RedirectUri
    scope: str | None
    state: str | None
    acr_values: str | None
    nonce: str | None
    prompt: str | None
    correlation_id: str | None
    context: str | None
    proof_key_for_code_exchange: ProofKeyForCodeExchange

    def to_query_params(self) -> Dict[str, str]:
        """Return the authorize query parameters, omitting absent values."""
        pkce = self.proof_key_for_code_exchange
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": str(self.redirect_uri),
            "scope": self.scope,
            "state": self.state,
            "acr_values": self.acr_values,
            "nonce": self.nonce,
            "prompt": self.prompt,
            "correlation_id": self.correlation_id,
            "context": self.context,
            "code_challenge": pkce.code_challenge,
            "code_challenge_method": pkce.code_challenge_method,
        }
        return {key: value for key, value in params.items() if value is not None}


@dataclass(frozen=True)
class AuthorizeIntent:
    """Message handed to the authorization component.

    Carries the calling application's identity, the request to perform
    and the handles to notify once the request reaches a result. Any
    object implementing ``AuthorizationCallbacks`` can stand in for the
    default ``CallbackHandles``.
    """

    package_name: str
    request: AuthorizationRequest
    callbacks: AuthorizationCallbacks = field(default_factory=CallbackHandles)
    component: str = AUTHORIZATION_COMPONENT
