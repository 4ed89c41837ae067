# bumptrack/controllers/development_controller.py
from flask import current_app, jsonify

from bumptrack.services.development import development_table, resolve


def list_development():
    table = development_table()
    return jsonify({
        "success": True,
        "message": "Baby development reference data",
        "data": [table[week].to_dict() for week in sorted(table)],
    }), 200


def get_development(week):
    table = development_table()
    record = resolve(week, table, floor=current_app.config["DEVELOPMENT_EARLY_WEEK_FLOOR"])
    data = record.to_dict()
    data["requestedWeek"] = week
    data["exactMatch"] = week in table
    return jsonify({"success": True, "message": "Baby development for week", "data": data}), 200
