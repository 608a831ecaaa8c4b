"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request construction
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions return models from ``weather_dashboard.schemas`` and raise
``weather_dashboard.errors.TransportError`` on any failure to obtain them.
They use the shared session::

    from weather_dashboard.services.http import session

    resp = session.get(API_URL, params={...})
"""
