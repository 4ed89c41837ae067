# bumptrack/models/appointment.py
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso


class Appointment(db.Model):
    __tablename__ = "appointments"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pregnancy_id = db.Column(db.Integer, db.ForeignKey("pregnancies.id", ondelete="SET NULL"), nullable=True, index=True)

    date = db.Column(db.Date, nullable=False)
    time = db.Column(db.String(5), nullable=False)          # HH:MM
    type = db.Column(db.String(60), nullable=False)         # prenatal, ultrasound, lab work...
    doctor = db.Column(db.String(120), nullable=True)
    location = db.Column(db.String(200), nullable=True)
    notes = db.Column(db.Text, nullable=True)
    is_completed = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("appointments", cascade="all,delete-orphan"))

    def to_dict(self):
        return {
            "id": self.id,
            "pregnancyId": self.pregnancy_id,
            "date": iso(self.date),
            "time": self.time,
            "type": self.type,
            "doctor": self.doctor,
            "location": self.location,
            "notes": self.notes,
            "isCompleted": self.is_completed,
        }
