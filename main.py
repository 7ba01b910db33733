"""
env_validator – Example service entry point.

Shows the intended startup sequence: validate everything up front, then read
typed values from the returned EnvConfig.
"""

import sys

from env_validator import U16, U32, ConfigError, EnvAccessError, validate_env
from env_validator.config.settings import get_settings
from env_validator.utils.logger import configure_root_logger


def main() -> int:
    """Validate the example service's environment and print its settings."""
    configure_root_logger(get_settings().log_level)

    try:
        config = validate_env(
            "DATABASE_URL",
            "PORT",
            "API_KEY",
            "LOG_LEVEL",
            "MAX_CONNECTIONS",
        ).unwrap()

        port = config.require_parsed("PORT", U16)
        max_connections = config.require_parsed("MAX_CONNECTIONS", U32)
    except (ConfigError, EnvAccessError) as e:
        print(str(e).rstrip("\n"), file=sys.stderr)
        return 1

    print(f"Server starting on port {port}")
    print(f"Max connections: {max_connections}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
