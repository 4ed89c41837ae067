# bumptrack/models/baby_development.py
from bumptrack.extensions import db
from bumptrack.services.development import DevelopmentRecord


class BabyDevelopment(db.Model):
    """Static reference rows, seeded once with ``flask seed-development``."""
    __tablename__ = "baby_development"
    id = db.Column(db.Integer, primary_key=True)
    week = db.Column(db.Integer, nullable=False, unique=True, index=True)

    size_comparison = db.Column(db.String(80), nullable=False)  # e.g. "Lemon"
    image_url = db.Column(db.String(500), nullable=True)
    length_cm = db.Column(db.Float, nullable=True)
    weight_grams = db.Column(db.Float, nullable=True)
    milestones = db.Column(db.JSON, nullable=False, default=list)
    description = db.Column(db.Text, nullable=True)

    def to_record(self) -> DevelopmentRecord:
        return DevelopmentRecord(
            week=self.week,
            size_comparison=self.size_comparison,
            length_cm=self.length_cm,
            weight_grams=self.weight_grams,
            image_url=self.image_url,
            milestones=tuple(self.milestones or ()),
            description=self.description,
        )

    @classmethod
    def upsert_records(cls, records):
        """Insert or refresh one row per record week. Caller commits."""
        existing = {row.week: row for row in cls.query.all()}
        created = updated = 0
        for record in records:
            row = existing.get(record.week)
            if row is None:
                row = cls(week=record.week)
                db.session.add(row)
                created += 1
            else:
                updated += 1
            row.size_comparison = record.size_comparison
            row.image_url = record.image_url
            row.length_cm = record.length_cm
            row.weight_grams = record.weight_grams
            row.milestones = list(record.milestones)
            row.description = record.description
        return created, updated
