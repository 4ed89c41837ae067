# bumptrack/routes/tracking_routes.py
from flask import Blueprint
from bumptrack.controllers import tracking_controller as tc

weight_bp = Blueprint("weight", __name__, url_prefix="/api/v1/weight")
weight_bp.route("", methods=["POST"])(tc.create_weight_entry)
weight_bp.route("", methods=["GET"])(tc.list_weight_entries)
weight_bp.route("/<int:entry_id>", methods=["DELETE"])(tc.delete_weight_entry)

diary_bp = Blueprint("diary", __name__, url_prefix="/api/v1/diary")
diary_bp.route("", methods=["POST"])(tc.create_diary_entry)
diary_bp.route("", methods=["GET"])(tc.list_diary_entries)
diary_bp.route("/search", methods=["GET"])(tc.search_diary_entries)
diary_bp.route("/<int:entry_id>", methods=["PUT"])(tc.update_diary_entry)
diary_bp.route("/<int:entry_id>", methods=["DELETE"])(tc.delete_diary_entry)

appointments_bp = Blueprint("appointments", __name__, url_prefix="/api/v1/appointments")
appointments_bp.route("", methods=["POST"])(tc.create_appointment)
appointments_bp.route("", methods=["GET"])(tc.list_appointments)
appointments_bp.route("/upcoming", methods=["GET"])(tc.list_upcoming_appointments)
appointments_bp.route("/<int:appointment_id>", methods=["PUT"])(tc.update_appointment)
appointments_bp.route("/<int:appointment_id>", methods=["DELETE"])(tc.delete_appointment)

kick_counter_bp = Blueprint("kick_counter", __name__, url_prefix="/api/v1/kick-counter")
kick_counter_bp.route("", methods=["POST"])(tc.create_kick_session)
kick_counter_bp.route("", methods=["GET"])(tc.list_kick_sessions)

symptoms_bp = Blueprint("symptoms", __name__, url_prefix="/api/v1/symptoms")
symptoms_bp.route("", methods=["POST"])(tc.create_symptom)
symptoms_bp.route("", methods=["GET"])(tc.list_symptoms)
symptoms_bp.route("/<int:symptom_id>", methods=["PUT"])(tc.update_symptom)
symptoms_bp.route("/<int:symptom_id>", methods=["DELETE"])(tc.delete_symptom)

shopping_bp = Blueprint("shopping_list", __name__, url_prefix="/api/v1/shopping-list")
shopping_bp.route("", methods=["POST"])(tc.create_shopping_item)
shopping_bp.route("", methods=["GET"])(tc.list_shopping_items)
shopping_bp.route("/<int:item_id>", methods=["PUT"])(tc.update_shopping_item)
shopping_bp.route("/<int:item_id>", methods=["DELETE"])(tc.delete_shopping_item)
