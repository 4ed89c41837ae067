# bumptrack/routes/catalogue_routes.py
from flask import Blueprint
from bumptrack.controllers import catalogue_controller

# Public catalogue, no JWT needed
catalogue_bp = Blueprint("catalogue", __name__, url_prefix="/api/v1")

catalogue_bp.route("/exercises", methods=["GET"])(catalogue_controller.list_exercises)
catalogue_bp.route("/recipes", methods=["GET"])(catalogue_controller.list_recipes)
