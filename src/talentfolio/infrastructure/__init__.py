"""Infrastructure layer: HTTP API, authentication, persistence and services."""
