"""Numeric building blocks."""
