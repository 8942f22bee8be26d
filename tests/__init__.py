"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data, tokens)
- test_security.py: Password hashing and JWT helpers
- test_auth.py: Auth service and /api/v1/auth endpoints
- test_validation.py: Catalog validator rules
- test_catalog.py: Catalog service
- test_books.py: /api/v1/books endpoints
- test_seed.py: Startup initialization

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
