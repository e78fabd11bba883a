"""Domain models: venues, clusters and routes."""
