# bumptrack/models/pregnancy.py
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso
from bumptrack.services.gestation import AnchorKind, GestationAnchor, timeline


class Pregnancy(db.Model):
    __tablename__ = "pregnancies"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Both dates are stored for querying; anchor_kind says which one the user gave.
    last_menstrual_period = db.Column(db.Date, nullable=False)
    due_date = db.Column(db.Date, nullable=False)
    anchor_kind = db.Column(db.String(10), nullable=False, default=AnchorKind.LMP.value)

    pre_pregnancy_weight = db.Column(db.Float, nullable=True)   # kg
    current_weight = db.Column(db.Float, nullable=True)         # kg
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("pregnancies", cascade="all,delete-orphan"))

    @property
    def anchor(self) -> GestationAnchor:
        if self.anchor_kind == AnchorKind.DUE_DATE.value:
            return GestationAnchor.from_due_date(self.due_date)
        return GestationAnchor.from_lmp(self.last_menstrual_period)

    def set_anchor(self, anchor: GestationAnchor):
        self.anchor_kind = anchor.kind.value
        self.last_menstrual_period = anchor.lmp
        self.due_date = anchor.due_date

    @classmethod
    def active_for(cls, user_id):
        return (
            cls.query.filter_by(user_id=user_id, is_active=True)
            .order_by(cls.created_at.desc(), cls.id.desc())
            .first()
        )

    def to_dict(self, today=None):
        data = {
            "id": self.id,
            "lastMenstrualPeriod": iso(self.last_menstrual_period),
            "dueDate": iso(self.due_date),
            "anchor": self.anchor_kind,
            "prePregnancyWeight": self.pre_pregnancy_weight,
            "currentWeight": self.current_weight,
            "isActive": self.is_active,
            "createdAt": iso(self.created_at),
        }
        if today is not None:
            data["timeline"] = timeline(self.anchor, today).to_dict()
        return data
