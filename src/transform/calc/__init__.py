"""Return adjustment, estimation, and interpolation."""
