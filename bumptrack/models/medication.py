# bumptrack/models/medication.py
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso

MEDICATION_TYPES = ("vitamin", "supplement", "medication", "prescription")


class Medication(db.Model):
    __tablename__ = "medications"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pregnancy_id = db.Column(db.Integer, db.ForeignKey("pregnancies.id", ondelete="SET NULL"), nullable=True, index=True)

    name = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(20), nullable=False)
    dosage = db.Column(db.String(80), nullable=True)           # e.g. "400 mcg"
    frequency = db.Column(db.String(40), nullable=True)        # daily, twice_daily, weekly...
    start_date = db.Column(db.Date, nullable=True)
    end_date = db.Column(db.Date, nullable=True)
    prescribed_by = db.Column(db.String(120), nullable=True)
    notes = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("medications", cascade="all,delete-orphan"))
    logs = db.relationship("MedicationLog", backref="medication", cascade="all,delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "pregnancyId": self.pregnancy_id,
            "name": self.name,
            "type": self.type,
            "dosage": self.dosage,
            "frequency": self.frequency,
            "startDate": iso(self.start_date),
            "endDate": iso(self.end_date),
            "prescribedBy": self.prescribed_by,
            "notes": self.notes,
            "isActive": self.is_active,
        }


class MedicationLog(db.Model):
    """One taken (or skipped) dose. Ownership goes through the medication."""
    __tablename__ = "medication_log"
    id = db.Column(db.Integer, primary_key=True)
    medication_id = db.Column(db.Integer, db.ForeignKey("medications.id", ondelete="CASCADE"),
                              nullable=False, index=True)
    taken_at = db.Column(db.DateTime(timezone=True), nullable=False)
    skipped = db.Column(db.Boolean, nullable=False, default=False)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "medicationId": self.medication_id,
            "takenAt": iso(self.taken_at),
            "skipped": self.skipped,
            "notes": self.notes,
        }
