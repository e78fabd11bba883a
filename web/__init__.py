"""Flask REST API."""
