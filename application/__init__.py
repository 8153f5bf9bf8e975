"""
Application layer for the GZCLP progression engine.

This package contains:
- use_cases/: Workflows composing the engine's pure functions
"""
