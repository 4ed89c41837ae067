# bumptrack/controllers/community_controller.py
"""
Community board: posts, replies and likes. Reading is public, writing needs
a token. Like counters are recounted from the likes table on every change.
"""

from flask import abort, current_app, jsonify, request
from flask_jwt_extended import jwt_required

from bumptrack.extensions import db
from bumptrack.helpers import (
    clean_str, current_user_id, get_json_body, get_owned_or_404, parse_bool, parse_int, require_fields,
)
from bumptrack.models import CommunityLike, CommunityPost, CommunityReply
from bumptrack.models.community import POST_CATEGORIES

DEFAULT_POST_LIMIT = 50
MAX_POST_LIMIT = 200


def _post_or_404(post_id):
    post = db.session.get(CommunityPost, post_id)
    if post is None:
        abort(404, description="Post not found")
    return post


def _reply_or_404(reply_id):
    reply = db.session.get(CommunityReply, reply_id)
    if reply is None:
        abort(404, description="Reply not found")
    return reply


def _parse_category(value):
    category = (clean_str(value) or "general").lower()
    if category not in POST_CATEGORIES:
        abort(422, description=f"category must be one of {list(POST_CATEGORIES)}")
    return category


def list_posts():
    limit = parse_int(request.args.get("limit"), "limit", 1, MAX_POST_LIMIT) or DEFAULT_POST_LIMIT
    query = CommunityPost.query
    if request.args.get("category"):
        query = query.filter_by(category=_parse_category(request.args["category"]))
    posts = query.order_by(CommunityPost.created_at.desc(), CommunityPost.id.desc()).limit(limit).all()
    return jsonify({"success": True, "message": "Community posts", "data": [p.to_dict() for p in posts]}), 200


@jwt_required()
def create_post():
    user_id = current_user_id()
    data = get_json_body()
    require_fields(data, ["content"])

    post = CommunityPost(
        user_id=user_id,
        title=clean_str(data.get("title")),
        content=str(data["content"]).strip(),
        category=_parse_category(data.get("category")),
        is_anonymous=parse_bool(data.get("isAnonymous", False), "isAnonymous"),
    )
    db.session.add(post)
    db.session.commit()
    current_app.logger.info("User %s created community post %s", user_id, post.id)
    return jsonify({"success": True, "message": "Post published.", "data": post.to_dict()}), 201


@jwt_required()
def delete_post(post_id):
    post = get_owned_or_404(CommunityPost, post_id, current_user_id(), "Post")
    db.session.delete(post)
    db.session.commit()
    return jsonify({"success": True, "message": "Post deleted successfully"}), 200


def list_replies(post_id):
    post = _post_or_404(post_id)
    replies = (
        CommunityReply.query.filter_by(post_id=post.id)
        .order_by(CommunityReply.created_at.asc(), CommunityReply.id.asc())
        .all()
    )
    return jsonify({"success": True, "message": "Replies", "data": [r.to_dict() for r in replies]}), 200


@jwt_required()
def create_reply(post_id):
    user_id = current_user_id()
    post = _post_or_404(post_id)
    data = get_json_body()
    require_fields(data, ["content"])

    reply = CommunityReply(
        post_id=post.id,
        user_id=user_id,
        content=str(data["content"]).strip(),
        is_anonymous=parse_bool(data.get("isAnonymous", False), "isAnonymous"),
    )
    db.session.add(reply)
    db.session.flush()
    post.replies_count = CommunityReply.query.filter_by(post_id=post.id).count()
    db.session.commit()
    return jsonify({"success": True, "message": "Reply published.", "data": reply.to_dict()}), 201


def _toggle_like(target, like_filter, liked: bool):
    """Add or remove the current user's like on ``target``; returns (target, created)."""
    user_id = current_user_id()
    existing = CommunityLike.query.filter_by(user_id=user_id, **like_filter).first()
    created = False
    if liked and existing is None:
        db.session.add(CommunityLike(user_id=user_id, **like_filter))
        created = True
    elif not liked and existing is not None:
        db.session.delete(existing)
    db.session.flush()
    target.likes_count = CommunityLike.query.filter_by(**like_filter).count()
    db.session.commit()
    return target, created


def _like_response(target, created):
    return jsonify({
        "success": True,
        "message": "Liked" if created else "Like updated",
        "data": {"id": target.id, "likesCount": target.likes_count},
    }), 201 if created else 200


@jwt_required()
def like_post(post_id):
    post = _post_or_404(post_id)
    return _like_response(*_toggle_like(post, {"post_id": post.id}, liked=True))


@jwt_required()
def unlike_post(post_id):
    post = _post_or_404(post_id)
    return _like_response(*_toggle_like(post, {"post_id": post.id}, liked=False))


@jwt_required()
def like_reply(reply_id):
    reply = _reply_or_404(reply_id)
    return _like_response(*_toggle_like(reply, {"reply_id": reply.id}, liked=True))


@jwt_required()
def unlike_reply(reply_id):
    reply = _reply_or_404(reply_id)
    return _like_response(*_toggle_like(reply, {"reply_id": reply.id}, liked=False))
