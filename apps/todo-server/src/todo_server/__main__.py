"""Entry point for the todo server."""

import logging

from todo_server import create_app

logger = logging.getLogger("todo_server")


def main() -> None:
    app = create_app()
    port = app.config["PORT"]
    logger.info("TodoServer is running on port %s", port)
    app.run(host="0.0.0.0", port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
