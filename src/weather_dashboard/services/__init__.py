"""
Shared service utilities.

- http.py - pre-configured requests session (single attempt, default timeout)
"""
