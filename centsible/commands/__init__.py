"""Imperative shell: one module per CLI command group."""
