"""
Constants and configuration values used throughout the library.

This module defines constants that are used across the different endpoint
packages, providing a centralized location for URLs, header values and
environment variable names so that every client builds requests the same way.
"""

# Logger name used throughout the library
LOGGER_NAME = "openai_tools"

# Default API locations
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_AZURE_API_VERSION = "2024-08-01-preview"

# HTTP header values
USER_AGENT = "openai-tools-python"
REALTIME_BETA_HEADER = "realtime=v1"

# WebSocket configuration for the realtime session
WS_MAX_SIZE = 16 * 1024 * 1024  # 16MB - large enough for audio deltas
CONNECTION_TIMEOUT = 30  # seconds

# Environment variable names
ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_OPENAI_BASE_URL = "OPENAI_BASE_URL"
ENV_AZURE_API_KEY = "AZURE_OPENAI_API_KEY"
ENV_AZURE_TOKEN = "AZURE_OPENAI_TOKEN"
ENV_AZURE_DEPLOYMENT = "AZURE_OPENAI_DEPLOYMENT_NAME"
ENV_AZURE_ENDPOINT = "AZURE_OPENAI_ENDPOINT"
ENV_AZURE_RESOURCE = "AZURE_OPENAI_RESOURCE_NAME"
ENV_AZURE_API_VERSION = "AZURE_OPENAI_API_VERSION"
ENV_LOG_DIR = "OPENAI_TOOLS_LOG_DIR"

# Azure hosts are recognised by this suffix
AZURE_HOST_MARKER = ".openai.azure.com"

# Audio uploads above this size are rejected by the service
MAX_AUDIO_FILE_SIZE = 25 * 1024 * 1024  # 25 MiB
