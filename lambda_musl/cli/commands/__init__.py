"""Commands for lambda-musl."""
