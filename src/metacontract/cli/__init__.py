"""Command line host harness."""
