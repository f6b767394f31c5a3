"""Game data models and JSON loaders."""
