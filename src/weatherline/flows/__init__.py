"""
Prefect flows.

Flows:
- notify: fetch the forecast, render the digest, send it to LINE

Usage (local):
    python -m weatherline.flows.notify

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    weatherline --lang ja --units si
"""
