"""
Majra Test Suite
================

Test organization:
- tests/unit/              - Unit tests (no external dependencies)
- tests/services/records/  - Records service scoring and route tests

Run tests:
    pytest                          # All tests
    pytest tests/unit               # Unit tests only
    pytest --cov=shared --cov=services
"""
