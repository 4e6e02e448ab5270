# cryptomath Test Suite
"""
Test suite including:
- Unit tests per module
- Property-based tests (hypothesis)
- Invalid input tests
- Integration tests (CLI, cross-check against the cryptography package)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
