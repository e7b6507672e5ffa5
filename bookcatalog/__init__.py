from flask import Flask, request

from .config import Config
from .db import init_db
from .errors import register_error_handlers
from .extensions import CORS_ALLOW_HEADERS, CORS_METHODS, cors, limiter
from .routes.api import api_bp
from .routes.main import main_bp
from .services.image_storage_service import configure_image_storage


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = app.config["JSON_SORT_KEYS"]

    # registered before Flask-Cors so it runs after it and has the last word
    @app.after_request
    def apply_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = ", ".join(CORS_METHODS)
        response.headers["Access-Control-Allow-Headers"] = ", ".join(CORS_ALLOW_HEADERS)
        return response

    cors.init_app(
        app,
        origins="*",
        send_wildcard=True,
        methods=CORS_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
        expose_headers=["Location"],
    )
    limiter.init_app(app)
    init_db(app)
    configure_image_storage(app)

    @app.before_request
    def answer_preflight():
        # any path, known or not, answers OPTIONS with an empty body
        if request.method == "OPTIONS":
            return app.response_class(status=200, mimetype="application/json")
        return None

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)
    register_error_handlers(app)

    return app


def describe_endpoints(app) -> list[str]:
    lines = []
    for rule in sorted(app.url_map.iter_rules(), key=lambda item: item.rule):
        if rule.endpoint == "static":
            continue
        methods = sorted(rule.methods - {"HEAD", "OPTIONS"})
        lines.append(f"{', '.join(methods)} {rule.rule}")
    return lines
