"""Credential discovery for the REST API."""

from resvn.auth.credentials import (
    cached_credentials,
    from_auth_file,
    from_login,
    parse_user_pass,
)

__all__ = ["cached_credentials", "from_auth_file", "from_login", "parse_user_pass"]
