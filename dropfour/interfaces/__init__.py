"""
dropfour.interfaces - Front ends for playing dropfour
"""

# Don't import anything here to avoid circular imports
__all__ = []
