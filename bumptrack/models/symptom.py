# bumptrack/models/symptom.py
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso


class Symptom(db.Model):
    __tablename__ = "symptoms"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pregnancy_id = db.Column(db.Integer, db.ForeignKey("pregnancies.id", ondelete="SET NULL"), nullable=True, index=True)

    date = db.Column(db.Date, nullable=False)
    symptom_type = db.Column(db.String(60), nullable=False)  # nausea, headache, back_pain...
    severity = db.Column(db.Integer, nullable=False)         # 1-10
    duration = db.Column(db.Integer, nullable=True)          # hours
    notes = db.Column(db.Text, nullable=True)
    remedies = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("symptoms", cascade="all,delete-orphan"))

    def to_dict(self):
        return {
            "id": self.id,
            "pregnancyId": self.pregnancy_id,
            "date": iso(self.date),
            "symptomType": self.symptom_type,
            "severity": self.severity,
            "duration": self.duration,
            "notes": self.notes,
            "remedies": self.remedies,
        }
