"""
GZCLP progression and reconciliation engine.

Pure functions over the domain models:
- core/: progression rules, workout analysis, change application,
  history recording, reconciliation and routine import
- settings: environment-driven configuration
- logging_config: logger setup for host applications
"""
