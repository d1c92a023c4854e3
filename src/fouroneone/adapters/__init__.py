"""Concrete implementations of the fouroneone interfaces."""
