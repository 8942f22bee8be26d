"""
Library API Application Package

A book catalog REST API with username/password login and JWT bearer tokens.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and get_db dependency
- main.py: FastAPI application factory, exception handlers
- dependencies.py: Dependency injection functions (bearer auth, paging)
- exceptions.py: Error types raised by services
- stores.py: Query helpers for users and books
- seed.py: Table creation and sample data
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (auth, catalog, validation, security)
"""

__version__ = "0.1.0"
