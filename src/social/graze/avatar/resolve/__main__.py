from typing import List
import argparse
import aiohttp
import asyncio
import logging

logger = logging.getLogger(__name__)

from social.graze.avatar.resolve.avatar import resolve_avatar


async def realMain() -> None:
    parser = argparse.ArgumentParser(prog="resolve", description="Resolve avatars")
    parser.add_argument(
        "account_type", help="The account type (github, gravatar or mastodon)."
    )
    parser.add_argument("identifier", nargs="+", help="The identifier(s) to resolve.")
    parser.add_argument(
        "--github-api-hostname",
        default="api.github.com",
        help="The GitHub API hostname to use for github lookups.",
    )
    parser.add_argument(
        "--mastodon-hostname",
        default="mastodon.social",
        help="The Mastodon instance to use for mastodon lookups.",
    )

    args = vars(parser.parse_args())

    identifiers: List[str] = args.get("identifier", [])

    async with aiohttp.ClientSession() as session:
        for identifier in identifiers:
            try:
                result = await resolve_avatar(
                    session,
                    args.get("account_type"),
                    identifier,
                    github_api_hostname=args.get("github_api_hostname"),
                    mastodon_hostname=args.get("mastodon_hostname"),
                )
                if result.success:
                    print(f"{identifier} {result.photo}")
                else:
                    print(f"{identifier} {result.message} ({result.outcome})")
            except Exception:
                logging.exception("Exception resolving identifier %s", identifier)


def main() -> None:
    asyncio.run(realMain())


if __name__ == "__main__":
    main()
