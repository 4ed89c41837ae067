# bumptrack/routes/community_routes.py
from flask import Blueprint
from bumptrack.controllers import community_controller as cc

# Reading the board is public, posting needs a token
community_bp = Blueprint("community", __name__, url_prefix="/api/v1/community")

community_bp.route("/posts", methods=["GET"])(cc.list_posts)
community_bp.route("/posts", methods=["POST"])(cc.create_post)
community_bp.route("/posts/<int:post_id>", methods=["DELETE"])(cc.delete_post)
community_bp.route("/posts/<int:post_id>/replies", methods=["GET"])(cc.list_replies)
community_bp.route("/posts/<int:post_id>/replies", methods=["POST"])(cc.create_reply)
community_bp.route("/posts/<int:post_id>/like", methods=["POST"])(cc.like_post)
community_bp.route("/posts/<int:post_id>/like", methods=["DELETE"])(cc.unlike_post)
community_bp.route("/replies/<int:reply_id>/like", methods=["POST"])(cc.like_reply)
community_bp.route("/replies/<int:reply_id>/like", methods=["DELETE"])(cc.unlike_reply)
