# bumptrack/routes/care_routes.py
from flask import Blueprint
from bumptrack.controllers import care_controller as cc

medications_bp = Blueprint("medications", __name__, url_prefix="/api/v1/medications")
medications_bp.route("", methods=["POST"])(cc.create_medication)
medications_bp.route("", methods=["GET"])(cc.list_medications)
medications_bp.route("/log", methods=["GET"])(cc.list_daily_medication_log)
medications_bp.route("/<int:medication_id>", methods=["PUT"])(cc.update_medication)
medications_bp.route("/<int:medication_id>", methods=["DELETE"])(cc.delete_medication)
medications_bp.route("/<int:medication_id>/log", methods=["POST"])(cc.log_medication)
medications_bp.route("/<int:medication_id>/log", methods=["GET"])(cc.list_medication_log)

birth_plan_bp = Blueprint("birth_plan", __name__, url_prefix="/api/v1/birth-plan")
birth_plan_bp.route("", methods=["POST"])(cc.create_birth_plan)
birth_plan_bp.route("", methods=["GET"])(cc.get_birth_plan)
birth_plan_bp.route("/<int:plan_id>", methods=["PUT"])(cc.update_birth_plan)
