# bumptrack/models/catalogue.py
from sqlalchemy.sql import func
from bumptrack.extensions import db

TRIMESTER_TAGS = ("first", "second", "third", "all")


class Exercise(db.Model):
    """Exercise video catalogue, read-only through the API."""
    __tablename__ = "exercises"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, unique=True)
    description = db.Column(db.Text, nullable=True)
    video_url = db.Column(db.String(500), nullable=True)
    duration = db.Column(db.Integer, nullable=True)           # minutes
    difficulty = db.Column(db.String(10), nullable=True)      # easy, medium, hard
    trimester = db.Column(db.String(10), nullable=False, default="all")
    category = db.Column(db.String(40), nullable=True)        # cardio, strength, flexibility, breathing
    instructions = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "videoUrl": self.video_url,
            "duration": self.duration,
            "difficulty": self.difficulty,
            "trimester": self.trimester,
            "category": self.category,
            "instructions": self.instructions,
        }


class Recipe(db.Model):
    __tablename__ = "recipes"
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, unique=True)
    description = db.Column(db.Text, nullable=True)
    ingredients = db.Column(db.JSON, nullable=False, default=list)
    instructions = db.Column(db.JSON, nullable=False, default=list)
    prep_time = db.Column(db.Integer, nullable=True)          # minutes
    cook_time = db.Column(db.Integer, nullable=True)          # minutes
    servings = db.Column(db.Integer, nullable=True)
    category = db.Column(db.String(20), nullable=True)        # breakfast, lunch, dinner, snack
    nutrition_benefits = db.Column(db.Text, nullable=True)
    trimester = db.Column(db.String(10), nullable=False, default="all")
    image_url = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "ingredients": list(self.ingredients or []),
            "instructions": list(self.instructions or []),
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
            "servings": self.servings,
            "category": self.category,
            "nutritionBenefits": self.nutrition_benefits,
            "trimester": self.trimester,
            "imageUrl": self.image_url,
        }


def upsert_catalogue(model, key, rows):
    """Insert or refresh catalogue rows matched on ``key``. Caller commits."""
    existing = {getattr(row, key): row for row in model.query.all()}
    created = updated = 0
    for values in rows:
        row = existing.get(values[key])
        if row is None:
            row = model()
            db.session.add(row)
            created += 1
        else:
            updated += 1
        for column, value in values.items():
            setattr(row, column, value)
    return created, updated
