"""crosscutting package."""
