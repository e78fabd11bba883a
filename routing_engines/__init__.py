"""Clients for the external places and directions providers."""
