"""
Services Package

Business logic kept separate from HTTP handling (routers), so it can be
reused and tested without a running server.

Current services:
- auth.py: user registration and login
- catalog.py: book create/list/get/update/delete
- validation.py: required-field and ISBN uniqueness rules for book writes
- security.py: password hashing and JWT utilities
- rate_limiter.py: rate limiting with slowapi
"""
