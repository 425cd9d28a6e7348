"""
Browser Authorization Example

This example demonstrates how to use the authorize-intent library to build an
authorize request and hand it to a stand-in authorization component: the
default web browser.

The script:
1. Loads environment variables for the client and the authorization endpoint
2. Builds an authorize intent with the openid and email scopes
3. Renders the request as an authorization URL and opens it in the browser

Required environment variables:
- CLIENT_ID: The OAuth client identifier
- REDIRECT_URI: Where the authorization server sends the response
- AUTHORIZATION_ENDPOINT: The authorization server's authorize endpoint

Optional environment variables:
- PACKAGE_NAME: Identifier of the calling application (default "examples")

Usage:
    python examples/browser_authorize.py
"""

import hashlib
import logging
import os
import webbrowser

from dotenv import load_dotenv

import authorize_intent
from authorize_intent import Prompt, Scope


# Set up logging configuration
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(),  # Output to console
    ],
)
logger = logging.getLogger(__name__)


def on_success(result):
    logger.info("Authorization succeeded")


def on_completion(result):
    logger.info("Authorization finished without a specific handler")


def main() -> bool:
    """
    Build an authorize intent and open its URL in the default web browser.

    Returns:
        bool: True if the browser was opened, False if required environment
              variables are missing.
    """
    load_dotenv()

    client_id = os.getenv("CLIENT_ID")
    if not client_id:
        logger.error("Missing CLIENT_ID environment variable")
        return False

    redirect_uri = os.getenv("REDIRECT_URI")
    if not redirect_uri:
        logger.error("Missing REDIRECT_URI environment variable")
        return False

    auth_endpoint = os.getenv("AUTHORIZATION_ENDPOINT")
    if not auth_endpoint:
        logger.error("Missing AUTHORIZATION_ENDPOINT environment variable")
        return False

    package_name = os.getenv("PACKAGE_NAME", "examples")

    intent = (
        authorize_intent.AuthorizeIntentBuilder(
            package_name, client_id, hashlib.sha256, redirect_uri
        )
        .with_scopes(Scope.OPEN_ID, Scope.EMAIL)
        .with_prompt(Prompt.LOGIN)
        .with_success_callback(on_success)
        .with_completion_callback(on_completion)
        .build()
    )

    # Store the verifier with the session; it redeems the authorization code
    pkce = intent.request.proof_key_for_code_exchange
    logger.info(
        "Generated code_verifier (%d characters) for the token request",
        len(pkce.code_verifier),
    )

    authn_url = authorize_intent.build_authorize_url(auth_endpoint, intent.request)
    logger.info("Opening %s in the browser", auth_endpoint)

    webbrowser.open(authn_url)

    return True


if __name__ == "__main__":
    main()
