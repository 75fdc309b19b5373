"""
Explorer API - Web backend for the repository explorer and issue table.

Provides a FastAPI backend that serves GitHub repository search pages
and the issue table with its row selection.
"""
