"""CORS handling that leaves the public stream endpoint alone."""
import re
from starlette.middleware.cors import CORSMiddleware
from starlette.types import Receive, Scope, Send

# The stream route answers its own preflight and sets its own headers
STREAM_PATH = re.compile(r"^/api/videos/\d+/stream/?$")


class StreamAwareCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that passes stream requests straight to the router.

    Configured origins apply to the JSON API only. Playback stays open to any
    origin, and preflights for the stream get the route's empty 200 instead
    of the middleware's own reply.
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and STREAM_PATH.match(scope["path"]):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
