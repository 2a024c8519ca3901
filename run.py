"""Entrypoint that reads PORT from environment, no shell expansion needed."""
import uvicorn

from app.config import settings
from app.server import GreetingServer


def main():
    config = uvicorn.Config("app.main:app", host=settings.host, port=settings.port)
    GreetingServer(config).run()


if __name__ == "__main__":
    main()
