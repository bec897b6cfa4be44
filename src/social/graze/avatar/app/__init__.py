"""
Avatar Application Layer

This package implements the web application layer for the avatar service using the
aiohttp framework.

Key Components:
- cli.py: Entry point for running the application
- server.py: Web server configuration and middleware setup
- config.py: Configuration management using Pydantic settings
- handlers/: Request handlers for the public and internal endpoints
- tasks.py: Background task decaying the health gauge
- metrics.py: Metrics clients (Telegraf/StatsD or no-op)

Middleware and signals:
- Metrics middleware for request counts and timings
- Sentry middleware for error reporting
- A response prepare hook replacing the Server header

Endpoints:
- GET / : informational text
- POST /get-image : avatar lookup
- GET /internal/alive, /internal/ready : probes
"""
