"""Core domain: models, interfaces, services and transformations."""
