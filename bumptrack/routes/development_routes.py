# bumptrack/routes/development_routes.py
from flask import Blueprint
from bumptrack.controllers import development_controller

# Reference data is public, no JWT needed
development_bp = Blueprint("baby_development", __name__, url_prefix="/api/v1/baby-development")

development_bp.route("", methods=["GET"])(development_controller.list_development)
development_bp.route("/<int:week>", methods=["GET"])(development_controller.get_development)
