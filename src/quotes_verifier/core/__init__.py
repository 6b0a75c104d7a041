"""Configuration, errors and shared types."""
