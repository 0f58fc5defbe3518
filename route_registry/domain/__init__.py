"""Domain layer: protocols (ports) for the registry's external collaborators."""
