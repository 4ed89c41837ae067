# bumptrack/controllers/pregnancy_controller.py
"""
Pregnancy profile endpoints. A user has at most one active pregnancy;
creating a new one deactivates the previous, nothing is ever hard-deleted.
"""

from flask import abort, current_app, jsonify
from flask_jwt_extended import jwt_required

from bumptrack.extensions import db
from bumptrack.helpers import (
    current_user_id, get_json_body, get_owned_or_404, parse_bool, parse_float, parse_iso_date, today_from_request,
)
from bumptrack.models import Pregnancy
from bumptrack.services.development import development_table, resolve
from bumptrack.services.gestation import GestationAnchor, due_date_from_lmp, timeline

MIN_WEIGHT_KG = 20
MAX_WEIGHT_KG = 300


def anchor_from_payload(data: dict):
    """
    Build the anchor from ``lastMenstrualPeriod`` or ``dueDate``.

    Both may be sent (the setup form does) as long as they agree on the
    280-day rule; ``dateType: "due"`` then marks the due date as the one the
    user typed. Returns ``None`` when neither is present.
    """
    lmp = parse_iso_date(data.get("lastMenstrualPeriod"), "lastMenstrualPeriod")
    due = parse_iso_date(data.get("dueDate"), "dueDate")

    if lmp and due:
        if due_date_from_lmp(lmp) != due:
            abort(422, description="lastMenstrualPeriod and dueDate must be 280 days apart; send only one")
        if data.get("dateType") == "due":
            return GestationAnchor.from_due_date(due)
        return GestationAnchor.from_lmp(lmp)
    if lmp:
        return GestationAnchor.from_lmp(lmp)
    if due:
        return GestationAnchor.from_due_date(due)
    return None


def _apply_weights(pregnancy: Pregnancy, data: dict):
    if "prePregnancyWeight" in data:
        pregnancy.pre_pregnancy_weight = parse_float(
            data["prePregnancyWeight"], "prePregnancyWeight", MIN_WEIGHT_KG, MAX_WEIGHT_KG)
    if "currentWeight" in data:
        pregnancy.current_weight = parse_float(
            data["currentWeight"], "currentWeight", MIN_WEIGHT_KG, MAX_WEIGHT_KG)


def _deactivate_others(user_id: int, keep_id=None):
    query = Pregnancy.query.filter_by(user_id=user_id, is_active=True)
    if keep_id is not None:
        query = query.filter(Pregnancy.id != keep_id)
    return query.update({"is_active": False}, synchronize_session=False)


@jwt_required()
def create_pregnancy():
    user_id = current_user_id()
    data = get_json_body()

    anchor = anchor_from_payload(data)
    if anchor is None:
        return jsonify({"success": False, "message": "Provide lastMenstrualPeriod or dueDate"}), 422

    pregnancy = Pregnancy(user_id=user_id, is_active=True)
    pregnancy.set_anchor(anchor)
    _apply_weights(pregnancy, data)

    deactivated = _deactivate_others(user_id)
    db.session.add(pregnancy)
    db.session.commit()

    current_app.logger.info(
        "User %s created pregnancy %s (anchor=%s, deactivated=%s)",
        user_id, pregnancy.id, anchor.kind.value, deactivated,
    )
    return jsonify({
        "success": True,
        "message": "Pregnancy created successfully.",
        "data": pregnancy.to_dict(today=today_from_request()),
    }), 201


@jwt_required()
def get_active_pregnancy():
    user_id = current_user_id()
    today = today_from_request()

    pregnancy = Pregnancy.active_for(user_id)
    if not pregnancy:
        return jsonify({"success": True, "message": "No active pregnancy", "data": None}), 200

    return jsonify({"success": True, "message": "Active pregnancy", "data": pregnancy.to_dict(today=today)}), 200


@jwt_required()
def update_pregnancy(pregnancy_id):
    user_id = current_user_id()
    pregnancy = get_owned_or_404(Pregnancy, pregnancy_id, user_id, "Pregnancy")
    data = get_json_body()

    anchor = anchor_from_payload(data)
    if anchor is not None:
        pregnancy.set_anchor(anchor)
    _apply_weights(pregnancy, data)

    if "isActive" in data:
        pregnancy.is_active = parse_bool(data["isActive"], "isActive")
        if pregnancy.is_active:
            _deactivate_others(user_id, keep_id=pregnancy.id)
        else:
            current_app.logger.info("User %s deactivated pregnancy %s", user_id, pregnancy.id)

    db.session.commit()
    return jsonify({
        "success": True,
        "message": "Pregnancy updated successfully.",
        "data": pregnancy.to_dict(today=today_from_request()),
    }), 200


@jwt_required()
def get_active_timeline():
    """Week, trimester, progress and the baby development record for today."""
    user_id = current_user_id()
    pregnancy = Pregnancy.active_for(user_id)
    if not pregnancy:
        return jsonify({"success": False, "message": "No active pregnancy"}), 404

    current = timeline(pregnancy.anchor, today_from_request())
    record = resolve(current.week, development_table(), floor=current_app.config["DEVELOPMENT_EARLY_WEEK_FLOOR"])

    return jsonify({
        "success": True,
        "message": "Timeline computed",
        "data": {
            "pregnancyId": pregnancy.id,
            "timeline": current.to_dict(),
            "development": record.to_dict(),
        }
    }), 200
