"""
Local Library Catalog Package

Server-rendered pages for browsing and editing the genres and book copies
of a library catalog.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions (sessions, repositories)
- validation.py / forms.py: Form validation and sanitization
- rendering.py: View renderer (Jinja2 templates)
- models/: SQLAlchemy ORM models
- repositories/: Store operations used by the handlers
- schemas/: Pydantic view models, one per template
- routers/: Page handlers
- services/: Rate limiting
- templates/: Jinja2 templates
"""

__version__ = "0.1.0"
