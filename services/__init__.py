"""Planning services: clustering, waypoints, scoring and orchestration."""
