"""
FastAPI application layer for the DSAGenie backend.

This module exposes HTTP endpoints that turn a coding-problem reference into
an explanation, pseudocode or a solution, and look up a tutorial video.
"""
