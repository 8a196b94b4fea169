"""Credential parsing and discovery.

Credentials come from, in order of precedence:
- the ``-l user:pass`` command-line flag
- the first parseable ``user:pass`` line of a credentials file
- the svn client's own credential cache (``svn auth --show-passwords``)
"""

import re
import subprocess
from collections.abc import Callable
from pathlib import Path

import structlog

from resvn.core.exceptions import CredentialsError
from resvn.core.models.config import Credentials

logger = structlog.get_logger(__name__)

AUTH_REALM = "CollabNet Subversion Repository"

_AUTH_LINE = re.compile(r"^(Password|Password cache|Username):\s*(.*)$", re.IGNORECASE | re.MULTILINE)


def parse_user_pass(text: str) -> Credentials | None:
    """Split ``user:pass`` on the first colon; None if there is no colon."""
    user, sep, password = text.partition(":")
    if not sep:
        return None
    return Credentials(username=user, password=password)


def _parse_error(desc: str, source: str) -> CredentialsError:
    parts = ["failed to parse credentials"]
    if desc.strip():
        parts.append(desc.strip())
    if source.strip():
        parts.append(f'"{source.strip()}"')
    return CredentialsError(": ".join(parts), details={"source": source})


def from_login(text: str) -> Credentials:
    """Parse credentials given on the command line."""
    credentials = parse_user_pass(text)
    if credentials is None:
        raise _parse_error("command-line", text)
    return credentials


def from_auth_file(path: str | Path) -> Credentials:
    """Parse the first ``user:pass`` line of a credentials file."""
    try:
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                credentials = parse_user_pass(line.rstrip("\r\n"))
                if credentials is not None:
                    return credentials
    except OSError as e:
        raise _parse_error("file", str(path)) from e
    raise _parse_error("file", str(path))


def cached_credentials(
    realm: str = AUTH_REALM,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> Credentials:
    """Read credentials cached by the svn client for the given realm.

    A ``Password cache`` entry means the password lives in an OS agent
    (gnome-keyring, kwallet, ...); the result is then marked agent-cached.
    """
    not_cached = CredentialsError(
        "SVN credentials not cached (see -h for help authenticating)",
        details={"realm": realm},
    )
    try:
        result = runner(
            ["svn", "auth", "--show-passwords", realm],
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError) as e:
        raise not_cached from e

    matches = _AUTH_LINE.findall(result.stdout or "")[:2]
    if not matches:
        raise not_cached

    username = password = ""
    agent_cached = False
    for key, value in matches:
        key = key.lower()
        if key == "username":
            username = value
        elif key == "password":
            password = value
        elif key == "password cache":
            password = value
            agent_cached = True

    if agent_cached:
        logger.info("using agent-based cached credentials", cache=password, user=username)
    return Credentials(username=username, password=password, agent_cached=agent_cached)
