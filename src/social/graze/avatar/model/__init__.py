"""
Avatar Data Models

Transient types describing a single avatar lookup and the health gauge
shared by the web application.

Key Components:
- lookup.py: AccountType, LookupRequest, LookupResult and validation errors
- health.py: HealthGauge used by the readiness probe
"""
