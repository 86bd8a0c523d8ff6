"""Authentication handlers for Jira API."""

import base64
from abc import ABC, abstractmethod
from typing import Dict

import click


class AuthenticatorBase(ABC):
    """Base class for authentication handlers."""

    @abstractmethod
    def get_headers(self) -> Dict[str, str]:
        """Get authentication headers."""


class BasicAuthenticator(AuthenticatorBase):
    """Basic authentication with an account email and an API token."""

    def __init__(self, email: str, api_token: str):
        if not email or not api_token:
            raise click.ClickException(
                "Basic authentication requires both JIRA_EMAIL and JIRA_API_TOKEN"
            )
        self.email = email
        self.api_token = api_token

    def get_headers(self) -> Dict[str, str]:
        auth_string = f"{self.email}:{self.api_token}"
        encoded_auth = base64.b64encode(auth_string.encode("utf-8")).decode("utf-8")
        return {"Authorization": f"Basic {encoded_auth}"}


def create_authenticator(config: dict) -> AuthenticatorBase:
    """Factory function building the authenticator from config credentials."""
    return BasicAuthenticator(
        config.get("jira_email") or "", config.get("jira_api_token") or ""
    )
