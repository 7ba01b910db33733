"""
env_validator - check required environment variables before startup.

    from env_validator import validate_env, U16

    config = validate_env("DATABASE_URL", "PORT", "API_KEY").unwrap()
    port = config.require_parsed("PORT", U16)
    database_url = config.get("DATABASE_URL")
"""

from env_validator.sources.dotenv_loader import build_environment, load_dotenv_file
from env_validator.utils.parsing import (
    I8,
    I16,
    I32,
    I64,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    USIZE,
    IntegerType,
    parse_value,
)
from env_validator.validation.accessor import EnvConfig
from env_validator.validation.errors import (
    ConfigError,
    EmptyVariable,
    EnvAccessError,
    EnvValidatorError,
    InvalidVariable,
    KeyNotFoundError,
    MissingVariable,
    ParseError,
)
from env_validator.validation.results import Failure, ParseFailed, Parsed, Success
from env_validator.validation.validator import validate_env, validate_env_vars

__version__ = "0.1.0"

__all__ = [
    "validate_env_vars",
    "validate_env",
    "load_dotenv_file",
    "build_environment",
    "EnvConfig",
    "Success",
    "Failure",
    "Parsed",
    "ParseFailed",
    "EnvValidatorError",
    "ConfigError",
    "MissingVariable",
    "EmptyVariable",
    "InvalidVariable",
    "EnvAccessError",
    "KeyNotFoundError",
    "ParseError",
    "IntegerType",
    "parse_value",
    "U8",
    "U16",
    "U32",
    "U64",
    "USIZE",
    "I8",
    "I16",
    "I32",
    "I64",
    "ISIZE",
]
