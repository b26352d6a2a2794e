"""
Shared infrastructure for talking to the Grafana HTTP API.

- http.py - ``requests.Session`` factory (timeout, optional read retries)
"""
