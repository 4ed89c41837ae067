# bumptrack/controllers/care_controller.py
"""
Medications (with their dose log) and the birth plan.
"""

import datetime

from flask import abort, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import IntegrityError

from bumptrack.controllers.tracking_controller import pregnancy_id_for
from bumptrack.extensions import db
from bumptrack.helpers import (
    clean_str, current_user_id, get_json_body, get_owned_or_404, parse_bool, parse_iso_date,
    parse_iso_datetime, parse_str_list, require_fields,
)
from bumptrack.models import BirthPlan, Medication, MedicationLog
from bumptrack.models.medication import MEDICATION_TYPES


# ----------------------------------------------------------------------------
# Medications
# ----------------------------------------------------------------------------

def _parse_medication_type(value):
    kind = (clean_str(value) or "").lower()
    if kind not in MEDICATION_TYPES:
        abort(422, description=f"type must be one of {list(MEDICATION_TYPES)}")
    return kind


def _check_period(medication: Medication):
    if medication.start_date and medication.end_date and medication.end_date < medication.start_date:
        abort(422, description="endDate cannot be before startDate")


@jwt_required()
def create_medication():
    user_id = current_user_id()
    data = get_json_body()
    require_fields(data, ["name", "type"])

    medication = Medication(
        user_id=user_id,
        pregnancy_id=pregnancy_id_for(user_id, data),
        name=str(data["name"]).strip(),
        type=_parse_medication_type(data["type"]),
        dosage=clean_str(data.get("dosage")),
        frequency=clean_str(data.get("frequency")),
        start_date=parse_iso_date(data.get("startDate"), "startDate"),
        end_date=parse_iso_date(data.get("endDate"), "endDate"),
        prescribed_by=clean_str(data.get("prescribedBy")),
        notes=clean_str(data.get("notes")),
        is_active=parse_bool(data.get("isActive", True), "isActive"),
    )
    _check_period(medication)

    db.session.add(medication)
    db.session.commit()
    return jsonify({"success": True, "message": "Medication saved.", "data": medication.to_dict()}), 201


@jwt_required()
def list_medications():
    user_id = current_user_id()
    medications = (
        Medication.query.filter_by(user_id=user_id)
        .order_by(Medication.name.asc(), Medication.id.asc())
        .all()
    )
    return jsonify({"success": True, "message": "Medications", "data": [m.to_dict() for m in medications]}), 200


@jwt_required()
def update_medication(medication_id):
    medication = get_owned_or_404(Medication, medication_id, current_user_id(), "Medication")
    data = get_json_body()

    if "name" in data:
        medication.name = clean_str(data["name"]) or medication.name
    if "type" in data:
        medication.type = _parse_medication_type(data["type"])
    if "startDate" in data:
        medication.start_date = parse_iso_date(data["startDate"], "startDate")
    if "endDate" in data:
        medication.end_date = parse_iso_date(data["endDate"], "endDate")
    for key, column in (("dosage", "dosage"), ("frequency", "frequency"),
                        ("prescribedBy", "prescribed_by"), ("notes", "notes")):
        if key in data:
            setattr(medication, column, clean_str(data[key]))
    if "isActive" in data:
        medication.is_active = parse_bool(data["isActive"], "isActive")
    _check_period(medication)

    db.session.commit()
    return jsonify({"success": True, "message": "Medication updated.", "data": medication.to_dict()}), 200


@jwt_required()
def delete_medication(medication_id):
    medication = get_owned_or_404(Medication, medication_id, current_user_id(), "Medication")
    db.session.delete(medication)
    db.session.commit()
    return jsonify({"success": True, "message": "Medication deleted successfully"}), 200


@jwt_required()
def log_medication(medication_id):
    """Record a dose as taken, or as skipped with ``skipped: true``."""
    user_id = current_user_id()
    medication = get_owned_or_404(Medication, medication_id, user_id, "Medication")
    data = get_json_body()

    log = MedicationLog(
        medication_id=medication.id,
        taken_at=parse_iso_datetime(data.get("takenAt"), "takenAt") or datetime.datetime.now(datetime.timezone.utc),
        skipped=parse_bool(data.get("skipped", False), "skipped"),
        notes=clean_str(data.get("notes")),
    )
    db.session.add(log)
    db.session.commit()

    current_app.logger.info("User %s logged medication %s (skipped=%s)", user_id, medication.id, log.skipped)
    return jsonify({"success": True, "message": "Medication log saved.", "data": log.to_dict()}), 201


@jwt_required()
def list_medication_log(medication_id):
    medication = get_owned_or_404(Medication, medication_id, current_user_id(), "Medication")
    logs = (
        MedicationLog.query.filter_by(medication_id=medication.id)
        .order_by(MedicationLog.taken_at.desc(), MedicationLog.id.desc())
        .all()
    )
    return jsonify({"success": True, "message": "Medication log", "data": [entry.to_dict() for entry in logs]}), 200


@jwt_required()
def list_daily_medication_log():
    """Every dose logged by the user on ``?date=`` (defaults to today)."""
    user_id = current_user_id()
    day = parse_iso_date(request.args.get("date"), "date") or datetime.date.today()
    start = datetime.datetime.combine(day, datetime.time.min)
    end = start + datetime.timedelta(days=1)

    logs = (
        MedicationLog.query.join(Medication)
        .filter(
            Medication.user_id == user_id,
            MedicationLog.taken_at >= start,
            MedicationLog.taken_at < end,
        )
        .order_by(MedicationLog.taken_at.asc(), MedicationLog.id.asc())
        .all()
    )
    return jsonify({
        "success": True,
        "message": "Medication log for day",
        "date": day.isoformat(),
        "data": [entry.to_dict() for entry in logs],
    }), 200


# ----------------------------------------------------------------------------
# Birth plan
# ----------------------------------------------------------------------------

def _parse_contacts(value):
    if value is None:
        return []
    if not isinstance(value, list):
        abort(422, description="emergencyContacts must be a list")
    contacts = []
    for item in value:
        if not isinstance(item, dict) or not clean_str(item.get("name")):
            abort(422, description="each emergency contact needs a name")
        contacts.append({
            "name": clean_str(item.get("name")),
            "phone": clean_str(item.get("phone")),
            "relation": clean_str(item.get("relation")),
        })
    return contacts


# request key -> (column, parser)
BIRTH_PLAN_FIELDS = {
    "preferredHospital": ("preferred_hospital", clean_str),
    "preferredDoctor": ("preferred_doctor", clean_str),
    "birthType": ("birth_type", clean_str),
    "painManagement": ("pain_management", clean_str),
    "laborPreferences": ("labor_preferences", lambda v: parse_str_list(v, "laborPreferences")),
    "birthPreferences": ("birth_preferences", lambda v: parse_str_list(v, "birthPreferences")),
    "emergencyContacts": ("emergency_contacts", _parse_contacts),
    "specialInstructions": ("special_instructions", clean_str),
    "musicPlaylist": ("music_playlist", lambda v: parse_str_list(v, "musicPlaylist")),
    "birthingTools": ("birthing_tools", lambda v: parse_str_list(v, "birthingTools")),
}


def _apply_birth_plan(plan: BirthPlan, data: dict):
    for key, (column, parse) in BIRTH_PLAN_FIELDS.items():
        if key in data:
            setattr(plan, column, parse(data[key]))


@jwt_required()
def create_birth_plan():
    user_id = current_user_id()
    data = get_json_body()

    plan = BirthPlan(user_id=user_id, pregnancy_id=pregnancy_id_for(user_id, data))
    _apply_birth_plan(plan, data)
    try:
        db.session.add(plan)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({"success": False, "message": "Birth plan already exists, update it instead"}), 409

    return jsonify({"success": True, "message": "Birth plan saved.", "data": plan.to_dict()}), 201


@jwt_required()
def get_birth_plan():
    plan = BirthPlan.query.filter_by(user_id=current_user_id()).first()
    return jsonify({
        "success": True,
        "message": "Birth plan" if plan else "No birth plan",
        "data": plan.to_dict() if plan else None,
    }), 200


@jwt_required()
def update_birth_plan(plan_id):
    plan = get_owned_or_404(BirthPlan, plan_id, current_user_id(), "Birth plan")
    _apply_birth_plan(plan, get_json_body())
    db.session.commit()
    return jsonify({"success": True, "message": "Birth plan updated.", "data": plan.to_dict()}), 200
