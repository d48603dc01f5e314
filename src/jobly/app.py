import logging

from flask import Flask, jsonify

from jobly.config import configure_logging
from jobly.errors import JoblyError

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    """Application factory."""
    configure_logging()
    app = Flask(__name__)

    # Register blueprints
    from jobly.routes.companies import bp as companies_bp
    from jobly.routes.jobs import bp as jobs_bp

    app.register_blueprint(companies_bp, url_prefix="/companies")
    app.register_blueprint(jobs_bp, url_prefix="/jobs")

    @app.errorhandler(JoblyError)
    def handle_jobly_error(err: JoblyError):
        if err.status >= 500:
            logger.error("Unhandled error: %s", err.message)
        return jsonify(err.to_dict()), err.status

    @app.route("/health")
    def health():
        return {"status": "ok"}

    return app


# For flask run command
app = create_app()
