# bumptrack/controllers/tracking_controller.py
"""
Per-user logs: weight, diary, appointments, kick counter, symptoms and
shopping list. Rows are always looked up by id AND owner.
"""

import datetime
import re

from flask import abort, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy import or_

from bumptrack.extensions import db
from bumptrack.helpers import (
    clean_str, current_user_id, get_json_body, get_owned_or_404, parse_bool, parse_float, parse_int,
    parse_iso_date, parse_iso_datetime, parse_str_list, require_fields,
)
from bumptrack.models import (
    Appointment, DiaryEntry, KickCounter, Pregnancy, ShoppingItem, Symptom, WeightEntry,
)
from bumptrack.models.shopping_item import PRIORITIES

TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
DEFAULT_DIARY_LIMIT = 50
MAX_DIARY_LIMIT = 200


def pregnancy_id_for(user_id: int, data: dict):
    """Explicit ``pregnancyId`` (must be the user's) or the active pregnancy."""
    if data.get("pregnancyId") is not None:
        pregnancy_id = parse_int(data["pregnancyId"], "pregnancyId")
        return get_owned_or_404(Pregnancy, pregnancy_id, user_id, "Pregnancy").id
    active = Pregnancy.active_for(user_id)
    return active.id if active else None


def _deleted(label):
    return jsonify({"success": True, "message": f"{label} deleted successfully"}), 200


def _parse_time(value):
    value = clean_str(value)
    if value is not None and not TIME_RE.match(value):
        abort(422, description="time must be HH:MM")
    return value


# ----------------------------------------------------------------------------
# Weight
# ----------------------------------------------------------------------------

def _sync_current_weight(pregnancy_id):
    """current_weight always mirrors the newest remaining entry, or None."""
    if pregnancy_id is None:
        return
    pregnancy = db.session.get(Pregnancy, pregnancy_id)
    if pregnancy is None:
        return
    newest = (
        WeightEntry.query.filter_by(pregnancy_id=pregnancy_id)
        .order_by(WeightEntry.date.desc(), WeightEntry.id.desc())
        .first()
    )
    pregnancy.current_weight = newest.weight if newest else None


@jwt_required()
def create_weight_entry():
    user_id = current_user_id()
    data = get_json_body()
    require_fields(data, ["weight", "date"])

    entry = WeightEntry(
        user_id=user_id,
        pregnancy_id=pregnancy_id_for(user_id, data),
        weight=parse_float(data["weight"], "weight", 20, 300),
        date=parse_iso_date(data["date"], "date"),
        notes=clean_str(data.get("notes")),
    )
    db.session.add(entry)
    db.session.flush()
    _sync_current_weight(entry.pregnancy_id)

    db.session.commit()
    return jsonify({"success": True, "message": "Weight entry saved.", "data": entry.to_dict()}), 201


@jwt_required()
def list_weight_entries():
    user_id = current_user_id()
    entries = (
        WeightEntry.query.filter_by(user_id=user_id)
        .order_by(WeightEntry.date.desc(), WeightEntry.id.desc())
        .all()
    )

    total_gain = None
    active = Pregnancy.active_for(user_id)
    if active and active.pre_pregnancy_weight is not None:
        latest = next((e for e in entries if e.pregnancy_id == active.id), None)
        if latest is not None:
            total_gain = round(latest.weight - active.pre_pregnancy_weight, 1)

    return jsonify({
        "success": True,
        "message": "Weight entries",
        "data": [e.to_dict() for e in entries],
        "totalGain": total_gain,
    }), 200


@jwt_required()
def delete_weight_entry(entry_id):
    entry = get_owned_or_404(WeightEntry, entry_id, current_user_id(), "Weight entry")
    pregnancy_id = entry.pregnancy_id
    db.session.delete(entry)
    db.session.flush()
    _sync_current_weight(pregnancy_id)
    db.session.commit()
    return _deleted("Weight entry")


# ----------------------------------------------------------------------------
# Diary
# ----------------------------------------------------------------------------

@jwt_required()
def create_diary_entry():
    user_id = current_user_id()
    data = get_json_body()
    require_fields(data, ["content"])

    entry = DiaryEntry(
        user_id=user_id,
        pregnancy_id=pregnancy_id_for(user_id, data),
        date=parse_iso_datetime(data.get("date"), "date") or datetime.datetime.now(datetime.timezone.utc),
        title=clean_str(data.get("title")),
        content=str(data["content"]).strip(),
        mood=clean_str(data.get("mood")),
        tags=parse_str_list(data.get("tags"), "tags"),
        image_url=clean_str(data.get("imageUrl")),
    )
    db.session.add(entry)
    db.session.commit()
    return jsonify({"success": True, "message": "Diary entry saved.", "data": entry.to_dict()}), 201


@jwt_required()
def list_diary_entries():
    user_id = current_user_id()
    limit = parse_int(request.args.get("limit"), "limit", 1, MAX_DIARY_LIMIT) or DEFAULT_DIARY_LIMIT
    entries = (
        DiaryEntry.query.filter_by(user_id=user_id)
        .order_by(DiaryEntry.date.desc(), DiaryEntry.id.desc())
        .limit(limit)
        .all()
    )
    return jsonify({"success": True, "message": "Diary entries", "data": [e.to_dict() for e in entries]}), 200


@jwt_required()
def search_diary_entries():
    user_id = current_user_id()
    query = (request.args.get("q") or "").strip()
    if not query:
        return jsonify({"success": False, "message": "Query parameter is required"}), 400

    pattern = f"%{query}%"
    entries = (
        DiaryEntry.query.filter(
            DiaryEntry.user_id == user_id,
            or_(DiaryEntry.title.ilike(pattern), DiaryEntry.content.ilike(pattern)),
        )
        .order_by(DiaryEntry.date.desc(), DiaryEntry.id.desc())
        .all()
    )
    return jsonify({"success": True, "message": "Diary search results", "data": [e.to_dict() for e in entries]}), 200


@jwt_required()
def update_diary_entry(entry_id):
    entry = get_owned_or_404(DiaryEntry, entry_id, current_user_id(), "Diary entry")
    data = get_json_body()

    if "content" in data:
        content = clean_str(data["content"])
        if not content:
            return jsonify({"success": False, "message": "content cannot be empty"}), 422
        entry.content = content
    if "date" in data:
        entry.date = parse_iso_datetime(data["date"], "date") or entry.date
    if "title" in data:
        entry.title = clean_str(data["title"])
    if "mood" in data:
        entry.mood = clean_str(data["mood"])
    if "tags" in data:
        entry.tags = parse_str_list(data["tags"], "tags")
    if "imageUrl" in data:
        entry.image_url = clean_str(data["imageUrl"])

    db.session.commit()
    return jsonify({"success": True, "message": "Diary entry updated.", "data": entry.to_dict()}), 200


@jwt_required()
def delete_diary_entry(entry_id):
    entry = get_owned_or_404(DiaryEntry, entry_id, current_user_id(), "Diary entry")
    db.session.delete(entry)
    db.session.commit()
    return _deleted("Diary entry")


# ----------------------------------------------------------------------------
# Appointments
# ----------------------------------------------------------------------------

@jwt_required()
def create_appointment():
    user_id = current_user_id()
    data = get_json_body()
    require_fields(data, ["date", "time", "type"])

    appointment = Appointment(
        user_id=user_id,
        pregnancy_id=pregnancy_id_for(user_id, data),
        date=parse_iso_date(data["date"], "date"),
        time=_parse_time(data["time"]),
        type=str(data["type"]).strip(),
        doctor=clean_str(data.get("doctor")),
        location=clean_str(data.get("location")),
        notes=clean_str(data.get("notes")),
        is_completed=parse_bool(data.get("isCompleted", False), "isCompleted"),
    )
    db.session.add(appointment)
    db.session.commit()
    return jsonify({"success": True, "message": "Appointment saved.", "data": appointment.to_dict()}), 201


@jwt_required()
def list_appointments():
    user_id = current_user_id()
    appointments = (
        Appointment.query.filter_by(user_id=user_id)
        .order_by(Appointment.date.desc(), Appointment.time.desc())
        .all()
    )
    return jsonify({"success": True, "message": "Appointments", "data": [a.to_dict() for a in appointments]}), 200


@jwt_required()
def list_upcoming_appointments():
    user_id = current_user_id()
    appointments = (
        Appointment.query.filter_by(user_id=user_id, is_completed=False)
        .order_by(Appointment.date.asc(), Appointment.time.asc())
        .all()
    )
    return jsonify({"success": True, "message": "Upcoming appointments", "data": [a.to_dict() for a in appointments]}), 200


@jwt_required()
def update_appointment(appointment_id):
    appointment = get_owned_or_404(Appointment, appointment_id, current_user_id(), "Appointment")
    data = get_json_body()

    if "date" in data:
        appointment.date = parse_iso_date(data["date"], "date") or appointment.date
    if "time" in data:
        appointment.time = _parse_time(data["time"]) or appointment.time
    if "type" in data:
        appointment.type = clean_str(data["type"]) or appointment.type
    for key, column in (("doctor", "doctor"), ("location", "location"), ("notes", "notes")):
        if key in data:
            setattr(appointment, column, clean_str(data[key]))
    if "isCompleted" in data:
        appointment.is_completed = parse_bool(data["isCompleted"], "isCompleted")

    db.session.commit()
    return jsonify({"success": True, "message": "Appointment updated.", "data": appointment.to_dict()}), 200


@jwt_required()
def delete_appointment(appointment_id):
    appointment = get_owned_or_404(Appointment, appointment_id, current_user_id(), "Appointment")
    db.session.delete(appointment)
    db.session.commit()
    return _deleted("Appointment")


# ----------------------------------------------------------------------------
# Kick counter
# ----------------------------------------------------------------------------

@jwt_required()
def create_kick_session():
    user_id = current_user_id()
    data = get_json_body()

    started = parse_iso_datetime(data.get("timeStarted"), "timeStarted")
    ended = parse_iso_datetime(data.get("timeEnded"), "timeEnded")
    if started and ended and (started.tzinfo is None) == (ended.tzinfo is None) and ended < started:
        return jsonify({"success": False, "message": "timeEnded must be after timeStarted"}), 422

    session = KickCounter(
        user_id=user_id,
        pregnancy_id=pregnancy_id_for(user_id, data),
        date=parse_iso_date(data.get("date"), "date") or datetime.date.today(),
        kick_count=parse_int(data.get("kickCount"), "kickCount", 0, 1000) or 0,
        time_started=started,
        time_ended=ended,
        notes=clean_str(data.get("notes")),
    )
    db.session.add(session)
    db.session.commit()
    current_app.logger.info("User %s logged %s kicks", user_id, session.kick_count)
    return jsonify({"success": True, "message": "Kick counter session saved.", "data": session.to_dict()}), 201


@jwt_required()
def list_kick_sessions():
    user_id = current_user_id()
    sessions = (
        KickCounter.query.filter_by(user_id=user_id)
        .order_by(KickCounter.date.desc(), KickCounter.id.desc())
        .all()
    )
    return jsonify({"success": True, "message": "Kick counter sessions", "data": [s.to_dict() for s in sessions]}), 200


# ----------------------------------------------------------------------------
# Symptoms
# ----------------------------------------------------------------------------

@jwt_required()
def create_symptom():
    user_id = current_user_id()
    data = get_json_body()
    require_fields(data, ["date", "symptomType", "severity"])

    symptom = Symptom(
        user_id=user_id,
        pregnancy_id=pregnancy_id_for(user_id, data),
        date=parse_iso_date(data["date"], "date"),
        symptom_type=str(data["symptomType"]).strip(),
        severity=parse_int(data["severity"], "severity", 1, 10),
        duration=parse_int(data.get("duration"), "duration", 0),
        notes=clean_str(data.get("notes")),
        remedies=clean_str(data.get("remedies")),
    )
    db.session.add(symptom)
    db.session.commit()
    return jsonify({"success": True, "message": "Symptom saved.", "data": symptom.to_dict()}), 201


@jwt_required()
def list_symptoms():
    user_id = current_user_id()
    symptoms = (
        Symptom.query.filter_by(user_id=user_id)
        .order_by(Symptom.date.desc(), Symptom.id.desc())
        .all()
    )
    return jsonify({"success": True, "message": "Symptoms", "data": [s.to_dict() for s in symptoms]}), 200


@jwt_required()
def update_symptom(symptom_id):
    symptom = get_owned_or_404(Symptom, symptom_id, current_user_id(), "Symptom")
    data = get_json_body()

    if "date" in data:
        symptom.date = parse_iso_date(data["date"], "date") or symptom.date
    if "symptomType" in data:
        symptom.symptom_type = clean_str(data["symptomType"]) or symptom.symptom_type
    if "severity" in data:
        symptom.severity = parse_int(data["severity"], "severity", 1, 10) or symptom.severity
    if "duration" in data:
        symptom.duration = parse_int(data["duration"], "duration", 0)
    if "notes" in data:
        symptom.notes = clean_str(data["notes"])
    if "remedies" in data:
        symptom.remedies = clean_str(data["remedies"])

    db.session.commit()
    return jsonify({"success": True, "message": "Symptom updated.", "data": symptom.to_dict()}), 200


@jwt_required()
def delete_symptom(symptom_id):
    symptom = get_owned_or_404(Symptom, symptom_id, current_user_id(), "Symptom")
    db.session.delete(symptom)
    db.session.commit()
    return _deleted("Symptom")


# ----------------------------------------------------------------------------
# Shopping list
# ----------------------------------------------------------------------------

def _parse_priority(value):
    priority = (clean_str(value) or "medium").lower()
    if priority not in PRIORITIES:
        abort(422, description=f"priority must be one of {list(PRIORITIES)}")
    return priority


@jwt_required()
def create_shopping_item():
    user_id = current_user_id()
    data = get_json_body()
    require_fields(data, ["name"])

    item = ShoppingItem(
        user_id=user_id,
        pregnancy_id=pregnancy_id_for(user_id, data),
        name=str(data["name"]).strip(),
        category=clean_str(data.get("category")),
        priority=_parse_priority(data.get("priority")),
        is_purchased=parse_bool(data.get("isPurchased", False), "isPurchased"),
        price=parse_float(data.get("price"), "price", 0),
        store=clean_str(data.get("store")),
        notes=clean_str(data.get("notes")),
    )
    db.session.add(item)
    db.session.commit()
    return jsonify({"success": True, "message": "Shopping list item saved.", "data": item.to_dict()}), 201


@jwt_required()
def list_shopping_items():
    user_id = current_user_id()
    items = (
        ShoppingItem.query.filter_by(user_id=user_id)
        .order_by(ShoppingItem.created_at.desc(), ShoppingItem.id.desc())
        .all()
    )
    return jsonify({"success": True, "message": "Shopping list", "data": [i.to_dict() for i in items]}), 200


@jwt_required()
def update_shopping_item(item_id):
    item = get_owned_or_404(ShoppingItem, item_id, current_user_id(), "Shopping list item")
    data = get_json_body()

    if "name" in data:
        item.name = clean_str(data["name"]) or item.name
    if "priority" in data:
        item.priority = _parse_priority(data["priority"])
    if "isPurchased" in data:
        item.is_purchased = parse_bool(data["isPurchased"], "isPurchased")
    if "price" in data:
        item.price = parse_float(data["price"], "price", 0)
    for key in ("category", "store", "notes"):
        if key in data:
            setattr(item, key, clean_str(data[key]))

    db.session.commit()
    return jsonify({"success": True, "message": "Shopping list item updated.", "data": item.to_dict()}), 200


@jwt_required()
def delete_shopping_item(item_id):
    item = get_owned_or_404(ShoppingItem, item_id, current_user_id(), "Shopping list item")
    db.session.delete(item)
    db.session.commit()
    return _deleted("Shopping list item")
