"""
Test Suite for Number Pipeline.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end pipeline and CLI tests
    - fixtures/: Shared test fixtures and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
