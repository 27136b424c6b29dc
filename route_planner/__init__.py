"""Race route planning service."""
