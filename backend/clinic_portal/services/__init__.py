"""Service layer: backend calls and the pure cycle/session computations."""
