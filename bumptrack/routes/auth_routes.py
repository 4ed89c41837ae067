# bumptrack/routes/auth_routes.py
from flask import Blueprint
from bumptrack.controllers import auth_controller

auth_bp = Blueprint("auth", __name__, url_prefix="/api/v1/auth")

auth_bp.route("/register", methods=["POST"])(auth_controller.register)
auth_bp.route("/login", methods=["POST"])(auth_controller.login)
auth_bp.route("/user", methods=["GET"])(auth_controller.get_user)
auth_bp.route("/user", methods=["PUT"])(auth_controller.update_user)
