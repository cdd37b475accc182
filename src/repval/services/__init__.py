"""Service layer: validated readers and the demonstration sequence."""
