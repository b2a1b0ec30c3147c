"""Install pipeline."""
