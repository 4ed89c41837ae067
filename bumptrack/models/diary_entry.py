# bumptrack/models/diary_entry.py
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso


class DiaryEntry(db.Model):
    __tablename__ = "diary_entries"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pregnancy_id = db.Column(db.Integer, db.ForeignKey("pregnancies.id", ondelete="SET NULL"), nullable=True, index=True)

    date = db.Column(db.DateTime(timezone=True), nullable=False)  # moment the entry is about
    title = db.Column(db.String(200), nullable=True)
    content = db.Column(db.Text, nullable=False)
    mood = db.Column(db.String(40), nullable=True)
    tags = db.Column(db.JSON, nullable=False, default=list)
    image_url = db.Column(db.String(500), nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("diary_entries", cascade="all,delete-orphan"))

    def to_dict(self):
        return {
            "id": self.id,
            "pregnancyId": self.pregnancy_id,
            "date": iso(self.date),
            "title": self.title,
            "content": self.content,
            "mood": self.mood,
            "tags": list(self.tags or []),
            "imageUrl": self.image_url,
        }
