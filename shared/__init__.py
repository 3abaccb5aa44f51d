"""
Shared utilities for the CRPT access client.

This package aggregates the cross-cutting building blocks used by the
client package and the mock service:

- config: Client configuration via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses
- test_helpers: Factories for sample documents, signers and transports

Nothing in shared/ may import from crpt_client/.
"""
