"""Configuration data structures and loading."""
