"""Foundation layer: errors and environment-driven settings."""
