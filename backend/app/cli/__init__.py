"""Command-line tools shipped with the backend package."""
