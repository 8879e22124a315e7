"""Command-line interface for lazywalk."""
