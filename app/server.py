"""uvicorn server that reports the listening port once the socket is bound."""

import logging

import uvicorn

logger = logging.getLogger(__name__)


class GreetingServer(uvicorn.Server):
    async def startup(self, sockets=None):
        # uvicorn exits from inside startup() when the bind fails
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Server listening on port {self.bound_port()}")

    def bound_port(self) -> int:
        """Port actually bound; differs from the configured one for PORT=0."""
        for server in self.servers:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port
