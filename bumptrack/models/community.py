# bumptrack/models/community.py
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso

POST_CATEGORIES = ("general", "first_trimester", "second_trimester", "third_trimester", "tips", "questions")


def _author(user, anonymous):
    if anonymous or user is None:
        return None
    return {"id": user.id, "name": f"{user.first_name} {user.last_name[:1]}."}


class CommunityPost(db.Model):
    __tablename__ = "community_posts"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = db.Column(db.String(200), nullable=True)
    content = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(40), nullable=False, default="general")
    is_anonymous = db.Column(db.Boolean, nullable=False, default=False)
    likes_count = db.Column(db.Integer, nullable=False, default=0)
    replies_count = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("community_posts", cascade="all,delete-orphan"))
    replies = db.relationship("CommunityReply", backref="post", cascade="all,delete-orphan")
    likes = db.relationship("CommunityLike", backref="post", cascade="all,delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "author": _author(self.user, self.is_anonymous),
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "isAnonymous": self.is_anonymous,
            "likesCount": self.likes_count,
            "repliesCount": self.replies_count,
            "createdAt": iso(self.created_at),
        }


class CommunityReply(db.Model):
    __tablename__ = "community_replies"
    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey("community_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    content = db.Column(db.Text, nullable=False)
    is_anonymous = db.Column(db.Boolean, nullable=False, default=False)
    likes_count = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("community_replies", cascade="all,delete-orphan"))
    likes = db.relationship("CommunityLike", backref="reply", cascade="all,delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "postId": self.post_id,
            "author": _author(self.user, self.is_anonymous),
            "content": self.content,
            "isAnonymous": self.is_anonymous,
            "likesCount": self.likes_count,
            "createdAt": iso(self.created_at),
        }


class CommunityLike(db.Model):
    """A like on exactly one of a post or a reply."""
    __tablename__ = "community_likes"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    post_id = db.Column(db.Integer, db.ForeignKey("community_posts.id", ondelete="CASCADE"), nullable=True)
    reply_id = db.Column(db.Integer, db.ForeignKey("community_replies.id", ondelete="CASCADE"), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        db.UniqueConstraint("user_id", "post_id", name="uq_community_likes_user_post"),
        db.UniqueConstraint("user_id", "reply_id", name="uq_community_likes_user_reply"),
    )
