# bumptrack/helpers.py
import datetime

from flask import abort, request
from flask_jwt_extended import get_jwt_identity


def api_response(success, message, data=None, status_code=200):
    return {
        "success": success,
        "message": message,
        "data": data
    }, status_code


def current_user_id() -> int:
    identity = get_jwt_identity()
    try:
        return int(identity)
    except (ValueError, TypeError):
        abort(401, description="Invalid user ID format in token")


def get_json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        abort(400, description="JSON object required")
    return data


def require_fields(data: dict, fields):
    missing = [f for f in fields if data.get(f) in (None, "")]
    if missing:
        abort(422, description=f"Missing fields: {missing}")


def parse_iso_date(value, field_name: str):
    """YYYY-MM-DD string -> date. ``None``/empty passes through as ``None``."""
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        abort(422, description=f"{field_name} must be an ISO date (YYYY-MM-DD)")
    try:
        return datetime.date.fromisoformat(value.strip())
    except ValueError:
        abort(422, description=f"{field_name} must be an ISO date (YYYY-MM-DD)")


def parse_iso_datetime(value, field_name: str):
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        abort(422, description=f"{field_name} must be an ISO datetime")
    try:
        return datetime.datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        abort(422, description=f"{field_name} must be an ISO datetime")


def parse_bool(value, field_name: str) -> bool:
    # JSON booleans only, the string "false" must not turn into True
    if not isinstance(value, bool):
        abort(422, description=f"{field_name} must be true or false")
    return value


def string_fields_or_400(data: dict, fields):
    bad = [f for f in fields if data.get(f) is not None and not isinstance(data[f], str)]
    if bad:
        abort(400, description=f"Fields must be strings: {bad}")


def parse_float(value, field_name: str, minimum=None, maximum=None):
    if value in (None, ""):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        abort(422, description=f"{field_name} must be numeric")
    if (minimum is not None and number < minimum) or (maximum is not None and number > maximum):
        abort(422, description=f"{field_name} must be between {minimum} and {maximum}")
    return number


def parse_int(value, field_name: str, minimum=None, maximum=None):
    if value in (None, ""):
        return None
    try:
        number = int(value)
    except (ValueError, TypeError):
        abort(422, description=f"{field_name} must be an integer")
    if (minimum is not None and number < minimum) or (maximum is not None and number > maximum):
        abort(422, description=f"{field_name} must be between {minimum} and {maximum}")
    return number


def clean_str(value):
    if value is None:
        return None
    return str(value).strip() or None


def today_from_request():
    """``?today=YYYY-MM-DD`` when given, the server's date otherwise."""
    return parse_iso_date(request.args.get("today"), "today") or datetime.date.today()


def get_owned_or_404(model, record_id: int, user_id: int, label: str):
    record = model.query.filter_by(id=record_id, user_id=user_id).first()
    if record is None:
        abort(404, description=f"{label} not found")
    return record


def iso(value):
    return value.isoformat() if value else None


def parse_str_list(value, field_name: str):
    """JSON list of strings, blanks dropped. ``None`` -> ``[]``."""
    if value is None:
        return []
    if not isinstance(value, list):
        abort(422, description=f"{field_name} must be a list")
    return [v.strip() for v in value if isinstance(v, str) and v.strip()]
