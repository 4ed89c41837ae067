# bumptrack/models/kick_counter.py
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso


class KickCounter(db.Model):
    __tablename__ = "kick_counters"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pregnancy_id = db.Column(db.Integer, db.ForeignKey("pregnancies.id", ondelete="SET NULL"), nullable=True, index=True)

    date = db.Column(db.Date, nullable=False)
    kick_count = db.Column(db.Integer, nullable=False, default=0)
    time_started = db.Column(db.DateTime(timezone=True), nullable=True)
    time_ended = db.Column(db.DateTime(timezone=True), nullable=True)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("kick_counters", cascade="all,delete-orphan"))

    @property
    def duration_minutes(self):
        if not self.time_started or not self.time_ended:
            return None
        return round((self.time_ended - self.time_started).total_seconds() / 60)

    def to_dict(self):
        return {
            "id": self.id,
            "pregnancyId": self.pregnancy_id,
            "date": iso(self.date),
            "kickCount": self.kick_count,
            "timeStarted": iso(self.time_started),
            "timeEnded": iso(self.time_ended),
            "durationMinutes": self.duration_minutes,
            "notes": self.notes,
        }
