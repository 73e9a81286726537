"""
Shared utilities for the Developer Portal access layer.

This package aggregates common building blocks consumed by the portal
service package:

- config: Portal configuration via pydantic-settings
- logging: Structured logging with request correlation
- errors: Canonical error types and responses
- test_helpers: In-memory gateway and data factories for tests

Do not import from service_* packages into shared/.
"""
