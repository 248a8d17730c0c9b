"""Command line entry points for color-printer."""
