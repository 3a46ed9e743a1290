"""Adapters binding the core to third-party clients."""
