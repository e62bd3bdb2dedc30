"""Character database storage layer.

This module persists unified character records into SQLite and packages
the finished database for distribution.
"""
