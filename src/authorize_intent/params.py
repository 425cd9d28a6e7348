"""Well-known authorization request parameter values."""

from enum import Enum
from typing import Tuple


class Scope(str, Enum):
    """Scopes understood by the authorization component.

    Any string is accepted where a scope is expected; these are the
    values the component knows how to render a consent screen for.
    """

    OPEN_ID = "openid"
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    POSTAL_CODE = "postal_code"
    ADDRESS = "address"
    BIRTHDATE = "birthdate"
    PICTURE = "picture"


class ACR(str, Enum):
    """Authentication Context Class Reference values."""

    AAL1 = "a1"
    AAL2 = "a2"
    AAL3 = "a3"


class Prompt(str, Enum):
    """Prompt directives for the authorization step."""

    LOGIN = "login"
    CONSENT = "consent"
    SELECT_ACCOUNT = "select_account"
    NONE = "none"


class CodeChallengeMethod(str, Enum):
    """RFC 7636 code challenge methods."""

    S256 = "S256"
    PLAIN = "plain"


DEFAULT_SCOPES: Tuple[Scope, ...] = (Scope.OPEN_ID,)
