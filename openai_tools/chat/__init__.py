"""
Chat completions (``POST /chat/completions``).

Usage example:
```python
from openai_tools.chat import ChatCompletion, ChatCompletionRequest
from openai_tools.common import Message, Role

request = ChatCompletionRequest(messages=[Message.from_string(Role.USER, "Hi!")])
response = ChatCompletion().chat(request)
print(response.first_content())
```
"""

from openai_tools.chat.request import ChatCompletion, ChatCompletionRequest
from openai_tools.chat.response import ChatCompletionResponse

__all__ = ["ChatCompletion", "ChatCompletionRequest", "ChatCompletionResponse"]
