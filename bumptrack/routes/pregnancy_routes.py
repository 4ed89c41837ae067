# bumptrack/routes/pregnancy_routes.py
from flask import Blueprint
from bumptrack.controllers import pregnancy_controller

pregnancy_bp = Blueprint("pregnancy", __name__, url_prefix="/api/v1/pregnancies")

pregnancy_bp.route("", methods=["POST"])(pregnancy_controller.create_pregnancy)
pregnancy_bp.route("/active", methods=["GET"])(pregnancy_controller.get_active_pregnancy)
pregnancy_bp.route("/active/timeline", methods=["GET"])(pregnancy_controller.get_active_timeline)
pregnancy_bp.route("/<int:pregnancy_id>", methods=["PUT"])(pregnancy_controller.update_pregnancy)
