"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NetClient, a product of Garudex Labs

Calling conventions.

Thin bridges from :meth:`NetworkRequest.perform` to the three ways a
caller can receive a result:

- ``aio``: ``await request.response_json()``, raising
  :class:`NetworkResponseError` on failure.
- ``callback``: ``request.callbacks.response_json(completion)`` calling
  ``completion(result, metadata)`` exactly once.
- ``promise``: ``request.promises.response_json()`` returning a
  :class:`concurrent.futures.Future`.
"""
