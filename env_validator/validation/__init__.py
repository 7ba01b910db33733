"""
Presence validation, the immutable accessor, and their error and result types.
"""
