"""
Review Service Application Package

Users rate and review catalog items and comment on each other's reviews.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- errors.py: Typed failures raised by the service layer
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection (sessions, identity, ownership)
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (credentials, tokens, identity, entities)
"""

__version__ = "1.0.0"
