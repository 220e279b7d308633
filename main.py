"""Launch the route finder FastAPI server."""

import logging

import uvicorn

from route_finder.config import load_settings


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    uvicorn.run("route_finder.server:app", host=settings.host, port=settings.port, reload=True)


if __name__ == "__main__":
    main()
