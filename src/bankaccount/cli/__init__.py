"""Command line interface for bankaccount."""
