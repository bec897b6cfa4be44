"""Avatar resolution.

Validates a lookup request and dispatches it to exactly one provider strategy.
"""

import logging
from typing import Any, Optional

from aiohttp import ClientSession

from social.graze.avatar.model.lookup import (
    AbsenceReason,
    AccountType,
    LookupException,
    LookupRequest,
    LookupResult,
)
from social.graze.avatar.resolve.providers import (
    fetch_github_avatar,
    fetch_mastodon_avatar,
    gravatar_url,
)

logger = logging.getLogger(__name__)


def parse_lookup_request(account_type: Any, identifier: Any) -> LookupRequest:
    """Validate raw input into a LookupRequest.

    Presence is checked before the account type is matched against the
    supported providers.

    Args:
        account_type: Raw account type, usually straight from a JSON body
        identifier: Raw identifier, usually straight from a JSON body

    Returns:
        LookupRequest for the input

    Raises:
        LookupException: If either value is missing or the account type is unknown
    """
    if not account_type or not identifier or not isinstance(identifier, str):
        raise LookupException.missing_input()

    if not isinstance(account_type, str) or account_type not in AccountType.__members__:
        raise LookupException.invalid_account_type()

    return LookupRequest(account_type=AccountType(account_type), identifier=identifier)


async def dispatch_lookup(
    session: ClientSession,
    lookup: LookupRequest,
    github_api_hostname: str = "api.github.com",
    mastodon_hostname: str = "mastodon.social",
    gravatar_hostname: str = "gravatar.com",
    gravatar_size: int = 400,
    user_agent: Optional[str] = None,
) -> LookupResult:
    """Run the single strategy matching the request's account type."""
    if lookup.account_type == AccountType.github:
        return await fetch_github_avatar(
            session, github_api_hostname, lookup.identifier, user_agent
        )
    elif lookup.account_type == AccountType.gravatar:
        return LookupResult.found(
            gravatar_url(lookup.identifier, gravatar_hostname, gravatar_size),
            AccountType.gravatar,
        )
    elif lookup.account_type == AccountType.mastodon:
        return await fetch_mastodon_avatar(
            session, mastodon_hostname, lookup.identifier, user_agent
        )
    return LookupResult.absent(AbsenceReason.invalid_account_type)


async def resolve_avatar(
    session: ClientSession,
    account_type: Any,
    identifier: Any,
    github_api_hostname: str = "api.github.com",
    mastodon_hostname: str = "mastodon.social",
    gravatar_hostname: str = "gravatar.com",
    gravatar_size: int = 400,
    user_agent: Optional[str] = None,
) -> LookupResult:
    """Resolve an avatar URL for an account type and identifier.

    Invalid input is reported as an absent result rather than raised, so callers
    only ever deal with LookupResult.

    Args:
        session: HTTP client session used by the network backed providers
        account_type: Raw account type
        identifier: Raw identifier (username, email address or account handle)
        github_api_hostname: GitHub API hostname
        mastodon_hostname: Mastodon instance hostname
        gravatar_hostname: Gravatar hostname
        gravatar_size: Gravatar image size in pixels
        user_agent: Optional User-Agent header for outbound requests

    Returns:
        LookupResult with a photo URL, or the reason there is none
    """
    try:
        lookup = parse_lookup_request(account_type, identifier)
    except LookupException as e:
        return LookupResult.absent(e.reason)

    result = await dispatch_lookup(
        session,
        lookup,
        github_api_hostname=github_api_hostname,
        mastodon_hostname=mastodon_hostname,
        gravatar_hostname=gravatar_hostname,
        gravatar_size=gravatar_size,
        user_agent=user_agent,
    )
    if not result.success:
        logger.info(
            "No avatar for %s %r: %s",
            lookup.account_type.value,
            lookup.identifier,
            result.outcome,
        )
    return result
