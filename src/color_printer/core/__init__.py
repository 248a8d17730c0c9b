"""Core output components: colors, message rendering, lines and dots."""
