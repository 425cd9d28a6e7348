"""Utility functions for authorize requests."""

import logging

import httpx

from .exceptions import InvalidParameterError
from .models import AuthorizationRequest
from .security import valid_url

logger = logging.getLogger(__name__)


def build_authorize_url(
    authorization_endpoint: str, request: AuthorizationRequest
) -> str:
    """
    Build an authorization URL carrying the parameters of ``request``.

    Query parameters already present on the endpoint are kept.

    Args:
        authorization_endpoint: The authorization endpoint URL
        request: The request built by an ``AuthorizeIntentBuilder``

    Returns:
        The properly encoded authorization URL

    Raises:
        InvalidParameterError: If the endpoint or the request is missing
        SecurityError: If the endpoint fails URL validation
    """
    if not authorization_endpoint:
        error_msg = "Cannot build authorization URL: authorization_endpoint is required"
        logger.error(error_msg)
        raise InvalidParameterError(error_msg)

    if request is None:
        error_msg = "Cannot build authorization URL: request is required"
        logger.error(error_msg)
        raise InvalidParameterError(error_msg)

    valid_url(authorization_endpoint)

    url = httpx.URL(authorization_endpoint).copy_merge_params(
        request.to_query_params()
    )
    logger.info("Built authorization URL with encoded parameters")
    return str(url)
