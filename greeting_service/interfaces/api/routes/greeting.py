"""Catch-all route that answers every request with the greeting."""

from fastapi import Response
from starlette.types import Receive, Scope, Send

from greeting_service.application.use_cases.get_greeting import create_greeting

PLAIN_TEXT_UTF8 = "text/plain; charset=UTF-8"
CATCH_ALL_PATH = "/{path:path}"


class GreetingEndpoint:
    """ASGI endpoint writing the greeting as a plain-text response.

    Starlette only restricts methods for function endpoints, so a route built
    on an instance of this class matches every method, including ones it has
    never heard of.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        # Nothing about the request is inspected.
        greeting = create_greeting()
        response = Response(content=greeting.encode(), media_type=PLAIN_TEXT_UTF8)
        await response(scope, receive, send)


greet = GreetingEndpoint()
