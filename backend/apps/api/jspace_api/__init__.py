"""J/Space API application."""
