"""Run the ActionScribe server: ``python -m actionscribe``."""

import uvicorn

from actionscribe.adapters.web.server import create_app
from actionscribe.config import AppConfig


def main():
    config = AppConfig.from_env()
    app = create_app(config)
    uvicorn.run(app, host="0.0.0.0", port=config.port, log_level="info")


if __name__ == "__main__":
    main()
