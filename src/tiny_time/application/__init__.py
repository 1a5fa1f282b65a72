"""Application layer - Port definitions.

This layer contains:
- Ports: Abstract interfaces for the clock source and the TimeProvider
  capability set

The application layer depends only on the domain layer.
Infrastructure implementations are selected by the factory and injected.
"""
