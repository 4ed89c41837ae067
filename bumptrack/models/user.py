# bumptrack/models/user.py
from werkzeug.security import generate_password_hash, check_password_hash
from sqlalchemy.sql import func
from bumptrack.extensions import db
from bumptrack.helpers import iso


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(80), nullable=False)
    last_name  = db.Column(db.String(80), nullable=False)
    email      = db.Column(db.String(255), unique=True, index=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)

    phone = db.Column(db.String(40), nullable=True)
    birth_date = db.Column(db.Date, nullable=True)
    city = db.Column(db.String(120), nullable=True)
    blood_type = db.Column(db.String(5), nullable=True)         # e.g. O+, AB-
    allergies = db.Column(db.Text, nullable=True)
    medical_conditions = db.Column(db.Text, nullable=True)
    emergency_contact = db.Column(db.String(120), nullable=True)
    emergency_phone = db.Column(db.String(40), nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def set_password(self, raw: str):
        self.password_hash = generate_password_hash(raw)

    def check_password(self, raw: str) -> bool:
        return check_password_hash(self.password_hash, raw)

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone": self.phone,
            "birthDate": iso(self.birth_date),
            "city": self.city,
            "bloodType": self.blood_type,
            "allergies": self.allergies,
            "medicalConditions": self.medical_conditions,
            "emergencyContact": self.emergency_contact,
            "emergencyPhone": self.emergency_phone,
        }
