"""Provider specific avatar lookup strategies.

GitHub and Mastodon are queried over HTTPS with a single request each. Gravatar
URLs are derived locally from a SHA-256 hash of the normalized email address.
"""

import hashlib
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

from aiohttp import ClientSession
import sentry_sdk

from social.graze.avatar.model.lookup import AbsenceReason, AccountType, LookupResult

logger = logging.getLogger(__name__)


GITHUB_ACCEPT = "application/vnd.github+json"


def avatar_field(body: Any, field: str) -> Optional[str]:
    """Extract a non-empty string field from a decoded JSON body.

    Args:
        body: Decoded JSON document
        field: Name of the field holding the avatar URL

    Returns:
        The field value if it is a non-empty string, None otherwise
    """
    if not isinstance(body, dict):
        return None
    value = body.get(field, None)
    if isinstance(value, str) and len(value) > 0:
        return value
    return None


async def fetch_avatar_field(
    session: ClientSession,
    account_type: AccountType,
    url: str,
    field: str,
    params: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> LookupResult:
    """Fetch a JSON document and read the avatar URL out of it.

    Any failure is logged and reported, then turned into an absent result. Nothing is retried.

    Args:
        session: HTTP client session
        account_type: Provider being queried, used for logging and the result
        url: Document URL
        field: Name of the field holding the avatar URL
        params: Optional query string parameters
        headers: Optional request headers

    Returns:
        LookupResult with the avatar URL, or the reason it could not be read
    """
    try:
        async with session.get(url, params=params, headers=headers) as resp:
            if resp.status != 200:
                logger.warning(
                    "%s lookup returned status %s for %s",
                    account_type.value,
                    resp.status,
                    url,
                )
                return LookupResult.absent(AbsenceReason.provider_status, account_type)
            try:
                body = await resp.json(content_type=None)
            except ValueError:
                logger.warning("%s lookup returned a non-JSON body for %s", account_type.value, url)
                return LookupResult.absent(AbsenceReason.malformed_payload, account_type)
    except Exception as e:
        logger.warning("Error fetching %s profile %s: %s", account_type.value, url, e)
        sentry_sdk.capture_exception(e)
        return LookupResult.absent(AbsenceReason.provider_unreachable, account_type)

    if not isinstance(body, dict):
        return LookupResult.absent(AbsenceReason.malformed_payload, account_type)

    photo = avatar_field(body, field)
    if photo is None:
        return LookupResult.absent(AbsenceReason.no_avatar, account_type)
    return LookupResult.found(photo, account_type)


async def fetch_github_avatar(
    session: ClientSession,
    api_hostname: str,
    username: str,
    user_agent: Optional[str] = None,
) -> LookupResult:
    """Look up a GitHub user's avatar through the public users API.

    Args:
        session: HTTP client session
        api_hostname: GitHub API hostname, normally api.github.com
        username: GitHub login
        user_agent: Optional User-Agent header value

    Returns:
        LookupResult carrying the ``avatar_url`` field
    """
    headers = {"Accept": GITHUB_ACCEPT}
    if user_agent:
        headers["User-Agent"] = user_agent
    url = "https://{host}/users/{username}".format(
        host=api_hostname, username=quote(username, safe="")
    )
    return await fetch_avatar_field(
        session, AccountType.github, url, "avatar_url", headers=headers
    )


async def fetch_mastodon_avatar(
    session: ClientSession,
    instance_hostname: str,
    acct: str,
    user_agent: Optional[str] = None,
) -> LookupResult:
    """Look up a Mastodon account's avatar on a single instance.

    Only accounts known to ``instance_hostname`` are found; ``user@other.instance``
    handles are passed through as-is and resolved by that one instance.

    Args:
        session: HTTP client session
        instance_hostname: Mastodon instance hostname, normally mastodon.social
        acct: Account handle
        user_agent: Optional User-Agent header value

    Returns:
        LookupResult carrying the ``avatar`` field
    """
    headers = {"Accept": "application/json"}
    if user_agent:
        headers["User-Agent"] = user_agent
    url = f"https://{instance_hostname}/api/v1/accounts/lookup"
    return await fetch_avatar_field(
        session,
        AccountType.mastodon,
        url,
        "avatar",
        params={"acct": acct},
        headers=headers,
    )


def normalize_email(email: str) -> str:
    return email.strip().lower()


def gravatar_hash(email: str) -> str:
    """SHA-256 hex digest of the normalized email address."""
    return hashlib.sha256(normalize_email(email).encode("utf-8")).hexdigest()


def gravatar_url(email: str, hostname: str = "gravatar.com", size: int = 400) -> str:
    """Build the Gravatar image URL for an email address.

    This never touches the network and always returns a URL, even for
    addresses Gravatar has never seen.
    """
    return f"https://{hostname}/avatar/{gravatar_hash(email)}?s={size}"
