"""
Prefect flows.

- build.py - build-dashboard: fetch a location and write a static page

Run with Prefect dashboard:
    prefect server start &
    python -m weather_dashboard.flows.build Paris
"""
