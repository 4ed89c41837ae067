# bumptrack/models/shopping_item.py
from sqlalchemy.sql import func
from bumptrack.extensions import db

PRIORITIES = ("low", "medium", "high")


class ShoppingItem(db.Model):
    __tablename__ = "shopping_items"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pregnancy_id = db.Column(db.Integer, db.ForeignKey("pregnancies.id", ondelete="SET NULL"), nullable=True, index=True)

    name = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(40), nullable=True)    # baby, mom, nursery...
    priority = db.Column(db.String(10), nullable=False, default="medium")
    is_purchased = db.Column(db.Boolean, nullable=False, default=False)
    price = db.Column(db.Float, nullable=True)
    store = db.Column(db.String(120), nullable=True)
    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = db.relationship("User", backref=db.backref("shopping_items", cascade="all,delete-orphan"))

    def to_dict(self):
        return {
            "id": self.id,
            "pregnancyId": self.pregnancy_id,
            "name": self.name,
            "category": self.category,
            "priority": self.priority,
            "isPurchased": self.is_purchased,
            "price": self.price,
            "store": self.store,
            "notes": self.notes,
        }
