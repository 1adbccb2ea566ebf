"""Infrastructure layer — in-memory collaborators and runtime wiring."""
