"""Command-line plan generation."""
