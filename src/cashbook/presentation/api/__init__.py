"""REST API presentation layer for Cashbook.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection and the session gate
    ├── exception_handlers.py # Domain exception to HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Request/response models
"""
