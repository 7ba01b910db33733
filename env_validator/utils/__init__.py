"""
Generic utility functions shared across modules.

Includes typed parsing of variable text and logging setup.
"""
