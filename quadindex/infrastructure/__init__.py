"""Infrastructure services shared across the package."""
