"""
Unit Tests - Testing Individual Components in Isolation.

Test Files:
    - test_filters.py: EVEN, ODD and GT<n> predicates
    - test_filter_registry.py: Prefix resolution and registration
    - test_observers.py: Print and count observers
    - test_file_source.py: Reading numbers from files
    - test_config_loader.py: Configuration loading/validation
    - test_adapters.py: Audit logger and metrics collector
"""
