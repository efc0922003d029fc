# FILE: grouping_core/__init__.py
"""
grouping_core package: people models, combinations, preferences, evaluator, optimizer, summary, IO, and validation.
"""
__all__ = [
    "models",
    "config",
    "constants",
    "errors",
    "combinations",
    "preferences",
    "evaluator",
    "optimizer",
    "summary",
    "roster",
    "validation",
    "io",
    "export_pdf",
]
