"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - config/profiles/quiet.yaml: Profile overlay for loader tests

Number files are generated per test with tmp_path (see conftest.py).
"""
