"""Structural contracts (Protocol) implemented by consumers and adapters."""
