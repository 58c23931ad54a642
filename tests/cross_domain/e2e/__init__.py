"""End-to-end tests spanning the board and linked accounts."""
