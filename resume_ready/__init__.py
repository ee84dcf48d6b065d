"""
Resume Ready Application Factory
"""
import atexit
import logging
from datetime import datetime, timezone

from flask import Flask, jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from resume_ready.config import get_config
from resume_ready.services.openai_service import TextOrganizer
from resume_ready.services.user_store import UserStore


def create_app(config_name=None, user_store=None, text_organizer=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    # Collaborators are built once and shared by every request
    if user_store is None:
        user_store = UserStore.from_uri(
            app.config["MONGODB_URI"],
            db_name=app.config["MONGODB_DB"],
            collection=app.config["MONGODB_USERS_COLLECTION"],
        )
        atexit.register(user_store.close)
    if text_organizer is None:
        text_organizer = TextOrganizer.from_config(app.config)
    app.extensions["user_store"] = user_store
    app.extensions["text_organizer"] = text_organizer

    from resume_ready.api import api_bp
    app.register_blueprint(api_bp)

    @app.errorhandler(RequestEntityTooLarge)
    def file_too_large(e):
        return jsonify({"error": "File too large"}), 413

    # Health check endpoint
    @app.route("/healthz")
    def healthz():
        """Health check for load balancers and monitoring"""
        try:
            app.extensions["user_store"].ping()
            db_status = "ok"
        except Exception as e:
            app.logger.warning("MongoDB ping failed: %s", e)
            db_status = f"error: {e}"

        return jsonify({
            "status": "ok" if db_status == "ok" else "degraded",
            "version": app.config["APP_VERSION"],
            "database": db_status,
            "openai_ready": app.extensions["text_organizer"].ready,
            "model": app.config["OPENAI_MODEL"],
            "timestamp": datetime.now(timezone.utc).isoformat()
        })

    # Version endpoint
    @app.route("/version")
    def version():
        """Version and build info"""
        return jsonify({
            "version": app.config["APP_VERSION"],
            "build_time": app.config["BUILD_TIME"],
            "git_commit": app.config["GIT_COMMIT"],
        })

    return app
