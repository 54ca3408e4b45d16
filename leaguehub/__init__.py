import os
import logging
from flask import Flask, jsonify, render_template, request
from dotenv import load_dotenv
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from leaguehub.config import config
from leaguehub.errors import RemoteError
from leaguehub.extensions import db, migrate, jwt, cors, ma, limiter


def _wants_json():
    return request.path.startswith("/api/")


def create_app(config_name=None):
    load_dotenv()

    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "development")

    app = Flask(__name__)
    config_class = config[config_name]
    app.config.from_object(config_class)

    # Validate production secrets
    if hasattr(config_class, "init_app"):
        config_class.init_app(app)

    # ── Logging ──────────────────────────────────────────────────────────
    logging.basicConfig(
        level=logging.INFO if not app.debug else logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    app.logger.setLevel(logging.INFO)

    # ── Extensions ───────────────────────────────────────────────────────
    db.init_app(app)
    migrate.init_app(app, db, render_as_batch=True)
    jwt.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"].split(",")}},
    )
    ma.init_app(app)
    limiter.init_app(app)

    # ── SQLite pragmas ───────────────────────────────────────────────────
    from sqlalchemy import event, Engine

    @event.listens_for(Engine, "connect")
    def set_sqlite_pragmas(dbapi_conn, connection_record):
        import sqlite3

        if isinstance(dbapi_conn, sqlite3.Connection):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA busy_timeout=5000")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    # ── Error handlers ───────────────────────────────────────────────────
    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({"error": "Validation failed", "messages": e.messages}), 400

    @app.errorhandler(RemoteError)
    def handle_remote_error(e):
        app.logger.error("Data gateway error on %s: %s", request.path, e)
        if _wants_json():
            return jsonify({"error": str(e)}), 502
        return render_template("error.html", code=502, message="The database is unavailable."), 502

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if _wants_json():
            return jsonify({"error": e.description}), e.code
        return render_template("error.html", code=e.code, message=e.description), e.code

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        app.logger.exception("Unhandled exception: %s", e)
        if _wants_json():
            return jsonify({"error": "Internal server error"}), 500
        return render_template("error.html", code=500, message="Internal server error"), 500

    # ── JWT errors ───────────────────────────────────────────────────────
    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"error": reason}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"error": reason}), 401

    # ── Models ───────────────────────────────────────────────────────────
    from leaguehub import models  # noqa: F401

    # ── Access gate ──────────────────────────────────────────────────────
    from leaguehub.auth.gate import init_gate

    init_gate(app)

    # ── Blueprints ───────────────────────────────────────────────────────
    from leaguehub.auth.routes import auth_bp, api_auth_bp
    from leaguehub.views.public import public_bp
    from leaguehub.views.admin import admin_bp
    from leaguehub.api.public_routes import public_api_bp
    from leaguehub.api.admin_routes import admin_api_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix=app.config["ADMIN_PREFIX"])
    app.register_blueprint(api_auth_bp, url_prefix="/api/auth")
    app.register_blueprint(public_api_bp, url_prefix="/api/public")
    app.register_blueprint(admin_api_bp, url_prefix="/api/admin")

    # ── Health check ─────────────────────────────────────────────────────
    @app.route("/health")
    def health():
        return jsonify({"status": "healthy"}), 200

    # ── CLI ───────────────────────────────────────────────────────────────
    from leaguehub.seeds.cli import seed_cli
    from leaguehub.auth.cli import users_cli

    app.cli.add_command(seed_cli, "seed")
    app.cli.add_command(users_cli, "users")

    return app
