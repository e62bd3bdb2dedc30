"""Source acquisition and parsing.

This module fetches the UCD source files and parses them into the
record map consumed by the annotation transforms and the store layer.
"""
