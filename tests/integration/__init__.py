"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that all components work together correctly, using
real number files written to tmp_path.

Test Files:
    - test_number_pipeline.py: Registry + source + pipeline + observers
    - test_cli.py: Command line behaviour and exit codes
"""
