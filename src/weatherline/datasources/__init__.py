"""External API integrations.

Each subdirectory is one service with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, the client class
    └── models.py         # Pydantic models for API payloads

- forecast/     Dark Sky style forecast API (GET, JSON)
- line_notify/  LINE Notify webhook (POST, form-encoded)

Clients own their ``requests.Session`` (see ``services/http.py``) and turn
non-success responses into the exceptions in ``weatherline.errors``.
"""
