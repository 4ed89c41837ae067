# bumptrack/controllers/catalogue_controller.py
from flask import abort, jsonify, request

from bumptrack.models import Exercise, Recipe
from bumptrack.models.catalogue import TRIMESTER_TAGS


def _filtered(model, order_column):
    query = model.query
    trimester = (request.args.get("trimester") or "").strip().lower()
    if trimester:
        if trimester not in TRIMESTER_TAGS:
            abort(422, description=f"trimester must be one of {list(TRIMESTER_TAGS)}")
        # rows tagged "all" suit every trimester
        query = query.filter(model.trimester.in_({trimester, "all"}))
    category = (request.args.get("category") or "").strip().lower()
    if category:
        query = query.filter(model.category == category)
    return query.order_by(order_column.asc()).all()


def list_exercises():
    exercises = _filtered(Exercise, Exercise.name)
    return jsonify({"success": True, "message": "Exercise videos", "data": [e.to_dict() for e in exercises]}), 200


def list_recipes():
    recipes = _filtered(Recipe, Recipe.title)
    return jsonify({"success": True, "message": "Recipes", "data": [r.to_dict() for r in recipes]}), 200
