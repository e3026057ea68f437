"""
Responses API (``/responses``): create, retrieve, delete and cancel.

Usage example:
```python
from openai_tools.responses import Responses, ResponsesRequest

response = Responses().create(ResponsesRequest(input="Write a haiku about rain"))
print(response.output_text())
```
"""

from openai_tools.responses.request import Responses, ResponsesRequest
from openai_tools.responses.response import Response

__all__ = ["Response", "Responses", "ResponsesRequest"]
