"""Sub-routers por feature (users, reviews)."""
