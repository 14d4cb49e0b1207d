"""Bearer credential resolution for inbound webhook requests."""

from __future__ import annotations

import re

from src.cachet.exceptions import MissingCredentialError

_BEARER_RE = re.compile(r"^Bearer (.*)$")


def resolve_credential(header: str | None, fallback: str | None = None) -> str:
    """Return the token to forward to Cachet.

    A present ``Authorization`` header must carry a bearer token; the
    configured *fallback* is used only when the header is absent.

    Raises:
        MissingCredentialError: No usable token could be resolved.
    """
    if header is not None:
        match = _BEARER_RE.match(header)
        if match is None or not match.group(1):
            raise MissingCredentialError(
                "Authorization header does not contain a Bearer token",
            )
        return match.group(1)
    if fallback:
        return fallback
    raise MissingCredentialError("no Authorization header and no fallback token")
