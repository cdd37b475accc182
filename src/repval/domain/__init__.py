"""Domain layer: value kinds, element bindings, faults, and read states."""
