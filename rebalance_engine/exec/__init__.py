"""Plan lifecycle and trade execution."""
