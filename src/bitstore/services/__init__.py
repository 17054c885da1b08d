"""Command outcomes and the single-call dispatcher."""
