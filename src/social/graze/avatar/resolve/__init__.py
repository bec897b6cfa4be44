"""
Avatar Resolution

This package turns an account type and an identifier into an avatar URL.

Key Components:
- avatar.py: Request validation and dispatch to a single provider
- providers.py: GitHub, Mastodon and Gravatar strategies
- __main__.py: CLI interface for resolution

Providers:
1. GitHub
   - GET https://api.github.com/users/{username}, reading avatar_url
2. Mastodon
   - GET https://mastodon.social/api/v1/accounts/lookup?acct={handle}, reading avatar
3. Gravatar
   - No request; the URL is built from the SHA-256 of the trimmed, lowercased email

Provider failures never raise. They come back as an absent LookupResult whose
reason is kept for logs and metrics, while the public response only ever says
that the profile image could not be fetched.
"""
