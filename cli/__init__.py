"""Typer command-line client for a running zipcode weather service."""
