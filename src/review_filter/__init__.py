"""
Review Filter

Rating, date and sort filtering plus aggregate statistics over
in-memory review records.
"""

__version__ = "0.1.0"
