"""Infrastructure layer: console input streams."""
