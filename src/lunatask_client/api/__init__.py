"""
HTTP layer.

Components:
- wire.py: base URL, paths, headers, envelopes (shared contract)
- client.py: TaskClient (httpx.Client)
- async_client.py: AsyncTaskClient (httpx.AsyncClient)
"""
