"""Application layer: board state, store and binding workflows."""
