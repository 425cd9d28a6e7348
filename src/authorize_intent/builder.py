"""Builder for authorize intents.

``AuthorizeIntentBuilder`` collects the parameters of an authorize
request, applies defaults, and produces an ``AuthorizeIntent`` addressed
to the authorization component. It performs no validation and no I/O:
whatever the caller supplies ends up in the request unchanged.

Example:
    >>> import hashlib
    >>> from authorize_intent import AuthorizeIntentBuilder, Prompt, Scope
    >>> intent = (
    ...     AuthorizeIntentBuilder(
    ...         "com.example.app", "client-id", hashlib.sha256, "myapp://callback"
    ...     )
    ...     .with_scopes(Scope.OPEN_ID, Scope.EMAIL)
    ...     .with_prompt(Prompt.LOGIN)
    ...     .build()
    ... )
    >>> intent.request.scope
    'openid email'
"""

import enum
import logging
from dataclasses import replace
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from .callbacks import CallbackHandles, Handle
from .models import AuthorizationRequest, AuthorizeIntent, RedirectUri
from .params import ACR, DEFAULT_SCOPES, Prompt, Scope
from .security import create_proof_key, encode_token, generate_state

logger = logging.getLogger(__name__)


class _Unset(enum.Enum):
    UNSET = "UNSET"


# Marks a list parameter that was never configured
UNSET = _Unset.UNSET

ValueList = Union[_Unset, Tuple[Any, ...]]


def canonical_value(item: Any) -> str:
    """Return the wire value of a parameter (an enum member or a string)."""
    return str(getattr(item, "value", item))


def join_values(values: ValueList) -> Optional[str]:
    """
    Serialize a list parameter.

    Args:
        values: ``UNSET``, or the configured values in order

    Returns:
        None when the list was never set or is empty, otherwise the
        space-separated canonical values
    """
    if values is UNSET or not values:
        return None
    return " ".join(canonical_value(value) for value in values)


def _distinct(values: Iterable[Any]) -> Tuple[Any, ...]:
    seen = set()
    result = []
    for value in values:
        key = canonical_value(value)
        if key not in seen:
            seen.add(key)
            result.append(value)
    return tuple(result)


class AuthorizeIntentBuilder:
    """Fluent builder of authorize intents.

    The state and the PKCE pair are generated once, when the builder is
    created; calling ``build()`` again produces an identical request.

    Args:
        package_name: Identifier of the calling application
        client_id: OAuth client identifier
        digest: hashlib-style constructor used for the PKCE challenge,
            e.g. ``hashlib.sha256``
        redirect_uri: Where the authorization response is delivered
    """

    def __init__(
        self,
        package_name: str,
        client_id: str,
        digest: Callable[[bytes], Any],
        redirect_uri: RedirectUri,
    ):
        self._package_name = package_name
        self._client_id = client_id
        self._digest = digest
        self._redirect_uri = redirect_uri

        self._scopes: ValueList = DEFAULT_SCOPES
        self._acr_values: ValueList = UNSET
        self._prompt: ValueList = UNSET
        self._nonce: Optional[str] = None
        self._correlation_id: Optional[str] = None
        self._context: Optional[str] = None
        self._callbacks = CallbackHandles()

        self.state: Optional[str] = generate_state()
        self._proof_key = create_proof_key(digest)

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def digest(self) -> Callable[[bytes], Any]:
        return self._digest

    def with_scopes(
        self, *scopes: Union[str, Scope]
    ) -> "AuthorizeIntentBuilder":
        """Replace the requested scopes, dropping repeated values."""
        self._scopes = _distinct(scopes)
        return self

    def with_redirect_uri(
        self, redirect_uri: RedirectUri
    ) -> "AuthorizeIntentBuilder":
        self._redirect_uri = redirect_uri
        return self

    def with_state(self, state: str) -> "AuthorizeIntentBuilder":
        """Replace the generated state with an encoding of ``state``."""
        self.state = encode_token(state)
        return self

    def without_state(self) -> "AuthorizeIntentBuilder":
        """Send the request without any state."""
        self.state = None
        return self

    def with_acr_values(
        self, *acr_values: Union[str, ACR]
    ) -> "AuthorizeIntentBuilder":
        self._acr_values = tuple(acr_values)
        return self

    def with_nonce(self, nonce: str) -> "AuthorizeIntentBuilder":
        self._nonce = nonce
        return self

    def with_correlation_id(self, correlation_id: str) -> "AuthorizeIntentBuilder":
        self._correlation_id = correlation_id
        return self

    def with_prompt(
        self, *prompts: Union[str, Prompt]
    ) -> "AuthorizeIntentBuilder":
        self._prompt = tuple(prompts)
        return self

    def with_context(self, context: str) -> "AuthorizeIntentBuilder":
        self._context = context
        return self

    def with_success_callback(
        self, handle: Optional[Handle]
    ) -> "AuthorizeIntentBuilder":
        """Set the handle to invoke when the request succeeds."""
        self._callbacks = replace(self._callbacks, success=handle)
        return self

    def with_failure_callback(
        self, handle: Optional[Handle]
    ) -> "AuthorizeIntentBuilder":
        """Set the handle to invoke when the request fails.

        The handle is not invoked when the request is cancelled.
        """
        self._callbacks = replace(self._callbacks, failure=handle)
        return self

    def with_completion_callback(
        self, handle: Optional[Handle]
    ) -> "AuthorizeIntentBuilder":
        """Set the handle to invoke when the request completes.

        It is skipped for any outcome whose own handle is set.
        """
        self._callbacks = replace(self._callbacks, completion=handle)
        return self

    def with_cancellation_callback(
        self, handle: Optional[Handle]
    ) -> "AuthorizeIntentBuilder":
        self._callbacks = replace(self._callbacks, cancellation=handle)
        return self

    def scope(self) -> Optional[str]:
        return join_values(self._scopes)

    def acr(self) -> Optional[str]:
        return join_values(self._acr_values)

    def prompt(self) -> Optional[str]:
        return join_values(self._prompt)

    def build(self) -> AuthorizeIntent:
        """
        Build the intent for the configured request.

        Returns:
            An ``AuthorizeIntent`` carrying the package name, the request
            and the callback handles
        """
        request = AuthorizationRequest(
            client_id=self._client_id,
            redirect_uri=self._redirect_uri,
            scope=self.scope(),
            state=self.state,
            acr_values=self.acr(),
            nonce=self._nonce,
            prompt=self.prompt(),
            correlation_id=self._correlation_id,
            context=self._context,
            proof_key_for_code_exchange=self._proof_key,
        )
        logger.info(
            "Built authorize intent for client %s (scope=%s)",
            self._client_id,
            request.scope,
        )
        return AuthorizeIntent(
            package_name=self._package_name,
            request=request,
            callbacks=self._callbacks,
        )
