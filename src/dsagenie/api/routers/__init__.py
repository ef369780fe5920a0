"""
API route handlers for different endpoint groups.

Each router handles one group of endpoints (health, tutor, video).
"""
