"""
Configuration for env_validator itself.

Provides a frozen settings object loaded from ENV_VALIDATOR_* environment
variables with upfront validation.
"""
