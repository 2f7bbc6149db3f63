"""Application layer: provider ports, the provider session adapter, and use cases."""
