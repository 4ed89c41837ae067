# bumptrack/controllers/auth_controller.py
from flask import current_app, jsonify
from sqlalchemy.exc import IntegrityError
from flask_jwt_extended import create_access_token, jwt_required

from bumptrack.extensions import db
from bumptrack.helpers import (
    clean_str, current_user_id, get_json_body, parse_iso_date, string_fields_or_400,
)
from bumptrack.models import User

MIN_PASSWORD_LENGTH = 6

# request key -> (column, parser)
PROFILE_FIELDS = {
    "first_name": ("first_name", clean_str),
    "last_name": ("last_name", clean_str),
    "phone": ("phone", clean_str),
    "birthDate": ("birth_date", lambda v: parse_iso_date(v, "birthDate")),
    "city": ("city", clean_str),
    "bloodType": ("blood_type", clean_str),
    "allergies": ("allergies", clean_str),
    "medicalConditions": ("medical_conditions", clean_str),
    "emergencyContact": ("emergency_contact", clean_str),
    "emergencyPhone": ("emergency_phone", clean_str),
}


def register():
    data = get_json_body()
    string_fields_or_400(data, ["first_name", "last_name", "email", "password"])
    first_name = (data.get("first_name") or "").strip()
    last_name  = (data.get("last_name") or "").strip()
    email      = (data.get("email") or "").lower().strip()
    password   = data.get("password")

    if not all([first_name, last_name, email, password]):
        return jsonify({"success": False, "message": "All fields required"}), 400
    if len(password) < MIN_PASSWORD_LENGTH:
        return jsonify({"success": False, "message": "Password too short"}), 400

    user = User(first_name=first_name, last_name=last_name, email=email)
    user.set_password(password)
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({"success": False, "message": "Email already exists"}), 409

    current_app.logger.info("Registered user %s", user.id)
    return jsonify({"success": True, "message": "User registered.", "data": user.to_dict()}), 201


def login():
    data = get_json_body()
    string_fields_or_400(data, ["email", "password"])
    email = (data.get("email") or "").lower().strip()
    password = data.get("password")

    if not email or not password:
        return jsonify({"message": "Email and password required", "success": False}), 400

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        return jsonify({"message": "Invalid credentials", "success": False}), 401

    access_token = create_access_token(identity=str(user.id))

    return jsonify({
        "message": "Login successful",
        "success": True,
        "user": {
            "id": user.id,
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name
        },
        "access_token": access_token
    }), 200


@jwt_required()
def get_user():
    user = db.session.get(User, current_user_id())
    if not user:
        return jsonify({"success": False, "message": "User not found"}), 404
    return jsonify({"success": True, "message": "User fetched", "data": user.to_dict()}), 200


@jwt_required()
def update_user():
    user = db.session.get(User, current_user_id())
    if not user:
        return jsonify({"success": False, "message": "User not found"}), 404

    data = get_json_body()
    for key, (column, parse) in PROFILE_FIELDS.items():
        if key in data:
            setattr(user, column, parse(data[key]))

    if not user.first_name or not user.last_name:
        db.session.rollback()
        return jsonify({"success": False, "message": "first_name and last_name cannot be empty"}), 422

    db.session.commit()
    return jsonify({"success": True, "message": "Profile updated successfully.", "data": user.to_dict()}), 200
