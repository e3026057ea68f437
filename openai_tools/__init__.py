"""
openai_tools - typed Python client for the OpenAI and Azure OpenAI APIs

The package wraps the REST endpoints (chat completions, responses,
embeddings, audio, images, files, batches, fine-tuning, moderations,
conversations, models) with pydantic request and response models, and the
realtime API with an asyncio WebSocket session.

Package layout:
- config: constants, optional logging setup and .env loading
- common: authentication, HTTP client, errors, messages, tools, schemas
- one sub-package per endpoint family, each with ``request`` and ``response``
- realtime: realtime sessions, events and state tracking

Getting Started:
1. Set up environment variables (or a .env file):
   - OPENAI_API_KEY: Your OpenAI API key
   - or AZURE_OPENAI_API_KEY, AZURE_OPENAI_DEPLOYMENT_NAME and
     AZURE_OPENAI_ENDPOINT (or AZURE_OPENAI_RESOURCE_NAME) for Azure
   - LOG_LEVEL: Logging level used by configure_logging (default INFO)

2. Call an endpoint:
   ```python
   from openai_tools.chat import ChatCompletion, ChatCompletionRequest
   from openai_tools.common import Message, Role

   client = ChatCompletion()
   response = client.chat(ChatCompletionRequest(
       messages=[Message.from_string(Role.USER, "Hello!")],
   ))
   print(response.first_content())
   ```

All errors raised by the library derive from
``openai_tools.common.errors.OpenAIToolError``.
"""

__version__ = "0.1.0"
