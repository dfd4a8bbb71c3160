"""Report assembly and shared error types."""
