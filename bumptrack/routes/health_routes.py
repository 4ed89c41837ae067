# bumptrack/routes/health_routes.py
from flask import Blueprint, current_app
from sqlalchemy import text
from bumptrack.extensions import db
from bumptrack.helpers import api_response

health_bp = Blueprint("health", __name__, url_prefix="/api/v1")


@health_bp.route("/health")
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        return api_response(
            success=True,
            message="Database connection successful",
            data={"status": "connected", "version": "1.0.0"}
        )
    except Exception as e:
        current_app.logger.exception("Health check database query failed")
        db.session.rollback()
        return api_response(
            success=False,
            message="Database connection failed",
            data={"status": "disconnected", "error": str(e)},
            status_code=503
        )
