"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (filesystem key-value
    storage, an in-memory store for tests and ephemeral runs, and the Pillow
    image codec).

Call context:
    Imported by ``passview.app.main`` for runtime wiring and by tests.
"""
