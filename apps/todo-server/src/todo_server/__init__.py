import logging

from flask import Flask
from .config import Config
from .storage import JsonStore


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)

    if test_config:
        app.config.update(test_config)

    # Configure logging
    log_level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logging.getLogger(__name__).setLevel(log_level)

    # One store per app; handlers reach it through app.extensions
    app.extensions["store"] = JsonStore(data_file=str(app.config["DATA_FILE"]))

    from .api import api_bp
    app.register_blueprint(api_bp)

    # Unknown routes and unsupported methods both answer 404 with no body
    @app.errorhandler(404)
    @app.errorhandler(405)
    def route_not_found(e):
        return "", 404

    return app
