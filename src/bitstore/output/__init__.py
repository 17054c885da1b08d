"""Terminal rendering of command results."""
