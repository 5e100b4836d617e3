"""
Application Modules.

- backend/: HTTP API, todo store, database, configuration
"""
