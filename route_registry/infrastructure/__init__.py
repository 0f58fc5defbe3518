"""Infrastructure adapters: HTTP collaborators and logging."""
