import logging
import os

from flask import Flask, jsonify

from quizbot.config import config_map
# Bound as a module: importing the quizbot.db subpackage rebinds the
# package attribute `db`, so a bare `db` global here would be clobbered.
from quizbot import extensions


def create_app(env: str = None) -> Flask:
    app = Flask(__name__)

    env = env or os.getenv("FLASK_ENV", "development")
    app.config.from_object(config_map.get(env, config_map["default"]))

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Init extensions
    extensions.db.init_app(app)
    extensions.migrate.init_app(app, extensions.db)
    extensions.jwt.init_app(app)

    with app.app_context():
        # Import models so Flask-Migrate can detect them
        from quizbot.db.models import Quiz, User  # noqa: F401

        # Register blueprints
        from quizbot.api.auth import auth_bp
        from quizbot.api.public import public_bp
        from quizbot.api.quizzes import quizzes_bp
        app.register_blueprint(auth_bp)
        app.register_blueprint(quizzes_bp)
        app.register_blueprint(public_bp)

    @app.cli.command("init-db")
    def init_db():
        """Create all tables (use `flask db migrate` once migrations exist)."""
        extensions.db.create_all()
        logging.getLogger(__name__).info("database tables created")

    @app.get("/api/health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app
