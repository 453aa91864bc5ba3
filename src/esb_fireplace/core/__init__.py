"""Core of the FIREPLACE binding.

The core knows nothing about Typer or Rich: it holds the domain types, the
error hierarchy, configuration and the dispatch service.
"""
