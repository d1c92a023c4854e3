"""Entrypoints for fouroneone.

Expose the helpers to the outside world: parse and validate inputs, call the
library functions and adapters, and present results.
"""
