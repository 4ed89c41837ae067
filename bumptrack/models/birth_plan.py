# bumptrack/models/birth_plan.py
from sqlalchemy.sql import func
from bumptrack.extensions import db


class BirthPlan(db.Model):
    __tablename__ = "birth_plans"
    id = db.Column(db.Integer, primary_key=True)
    # one plan per user, edited in place
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    pregnancy_id = db.Column(db.Integer, db.ForeignKey("pregnancies.id", ondelete="SET NULL"), nullable=True, index=True)

    preferred_hospital = db.Column(db.String(200), nullable=True)
    preferred_doctor = db.Column(db.String(120), nullable=True)
    birth_type = db.Column(db.String(40), nullable=True)        # natural, cesarean, water_birth...
    pain_management = db.Column(db.String(40), nullable=True)   # epidural, natural, nitrous_oxide...
    labor_preferences = db.Column(db.JSON, nullable=False, default=list)
    birth_preferences = db.Column(db.JSON, nullable=False, default=list)
    emergency_contacts = db.Column(db.JSON, nullable=False, default=list)  # [{"name", "phone", "relation"}]
    special_instructions = db.Column(db.Text, nullable=True)
    music_playlist = db.Column(db.JSON, nullable=False, default=list)
    birthing_tools = db.Column(db.JSON, nullable=False, default=list)     # birthing_ball, tub...

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("birth_plan", uselist=False, cascade="all,delete-orphan"))

    def to_dict(self):
        return {
            "id": self.id,
            "pregnancyId": self.pregnancy_id,
            "preferredHospital": self.preferred_hospital,
            "preferredDoctor": self.preferred_doctor,
            "birthType": self.birth_type,
            "painManagement": self.pain_management,
            "laborPreferences": list(self.labor_preferences or []),
            "birthPreferences": list(self.birth_preferences or []),
            "emergencyContacts": list(self.emergency_contacts or []),
            "specialInstructions": self.special_instructions,
            "musicPlaylist": list(self.music_playlist or []),
            "birthingTools": list(self.birthing_tools or []),
        }
