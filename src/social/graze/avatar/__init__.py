"""
Avatar - Profile Image Resolver

This module implements a small service that returns a profile image URL for an
account on GitHub, Mastodon or Gravatar through a single JSON endpoint.

Key Components:
- app: Web application layer with request handlers and server configuration
- model: Lookup request and result types, health gauge
- resolve: Provider strategies and the dispatch between them

Request Flow:
1. The account type and identifier are validated
2. Exactly one provider strategy runs
   - GitHub and Mastodon with one HTTPS request each
   - Gravatar locally, from a SHA-256 of the normalized email
3. The result is returned as either a photo URL or a generic failure

Nothing is stored between requests.
"""
