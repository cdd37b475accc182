"""repval — repetition type-checking and range-checking input validation."""

__version__ = "0.1.0"
