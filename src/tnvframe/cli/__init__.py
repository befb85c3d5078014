"""Command-line interface for tnvframe."""
