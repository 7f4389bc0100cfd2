"""Infrastructure Layer: concrete stores and logging setup."""
