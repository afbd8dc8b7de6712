"""Command-line interface for lambda-musl."""
