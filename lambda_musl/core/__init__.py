"""Core functionality for lambda-musl."""
