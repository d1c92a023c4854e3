"""Abstract contracts implemented by the adapters package."""
