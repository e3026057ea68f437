"""
Configuration module for the openai_tools library.

This module provides centralized configuration for the library, including
constants, logging setup, and environment-based credential loading.

Key components:
- constants: Library-wide constants such as default endpoints, header values,
  environment variable names and websocket limits.
- logging_config: Optional console and rotating-file logging for applications
  that want to see the library's log records.
- environment: .env loading through python-dotenv and environment lookups used
  by the authentication providers.

Usage examples:
```python
# Set up logging for your application
from openai_tools.config.logging_config import configure_logging
logger = configure_logging()
logger.info("Application started")

# Load a local .env file explicitly
from openai_tools.config.environment import load_environment
load_environment()

# Access constants
from openai_tools.config.constants import LOGGER_NAME, DEFAULT_BASE_URL
```
"""
