"""
Realtime protocol events.

- client: events the client sends (``session.update``, ``response.create``, ...)
- server: events the server sends, and ``parse_server_event`` to decode them
"""
