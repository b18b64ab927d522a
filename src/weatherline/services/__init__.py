"""
Shared utilities for the API clients.

- http.py - ``requests.Session`` factory (no retries, optional default timeout)
"""
