"""
Voice Notes Application.

- backend/: REST API, in-memory repositories, services, configuration
- client/: Client note store, derived view, HTTP client for the API
- cli/: Command line client (Typer + Rich)
"""
