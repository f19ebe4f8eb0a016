"""Infrastructure package."""
