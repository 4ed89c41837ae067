# bumptrack/models/weight_entry.py
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso


class WeightEntry(db.Model):
    __tablename__ = "weight_entries"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pregnancy_id = db.Column(db.Integer, db.ForeignKey("pregnancies.id", ondelete="SET NULL"), nullable=True, index=True)

    weight = db.Column(db.Float, nullable=False)    # kg
    date = db.Column(db.Date, nullable=False)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("weight_entries", cascade="all,delete-orphan"))

    def to_dict(self):
        return {
            "id": self.id,
            "pregnancyId": self.pregnancy_id,
            "weight": self.weight,
            "date": iso(self.date),
            "notes": self.notes,
        }
