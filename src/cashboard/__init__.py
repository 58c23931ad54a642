"""Cashboard - widget dashboard board state and account binding."""
