"""Object store provider implementations."""
