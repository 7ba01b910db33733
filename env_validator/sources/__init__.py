"""
Sources of environment variable definitions.

Loads local .env files into the process environment, or layers them with the
process environment and caller overrides into an explicit snapshot.
"""
