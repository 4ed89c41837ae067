# bumptrack/services/development.py
"""
Week-indexed baby development reference data.

``resolve`` picks the record to show for a gestational week out of any
week -> DevelopmentRecord mapping. Where the mapping comes from (seeded
table or the built-in fallback) is decided by ``development_table``.
"""

from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Tuple

EARLY_WEEK_FLOOR = 4


@dataclass(frozen=True)
class DevelopmentRecord:
    week: int
    size_comparison: str
    length_cm: Optional[float] = None
    weight_grams: Optional[float] = None
    image_url: Optional[str] = None
    milestones: Tuple[str, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    def to_dict(self):
        return {
            "week": self.week,
            "sizeComparison": self.size_comparison,
            "lengthCm": self.length_cm,
            "weightGrams": self.weight_grams,
            "imageUrl": self.image_url,
            "milestones": list(self.milestones),
            "description": self.description,
        }


TOO_EARLY_RECORD = DevelopmentRecord(
    week=0,
    size_comparison="Too early to compare",
    milestones=("Fertilized cell",),
    description="Your baby is still too small for a size comparison.",
)

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=200&h=200"

FALLBACK_TABLE = {
    record.week: record
    for record in (
        DevelopmentRecord(4, "Poppy seed", 0.1, None, None,
                          ("Embryo implants in the uterus",)),
        DevelopmentRecord(6, "Blueberry", 1.2, 0.5, _UNSPLASH.format("1498557850523-fd3d118b962e"),
                          ("Heart starts beating",)),
        DevelopmentRecord(8, "Raspberry", 1.6, 1, None,
                          ("Fingers and toes begin to form",)),
        DevelopmentRecord(10, "Strawberry", 3.1, 4, None,
                          ("Vital organs are in place",)),
        DevelopmentRecord(12, "Lemon", 5.4, 14, _UNSPLASH.format("1590502593747-42a996133562"),
                          ("Reflexes developing",)),
        DevelopmentRecord(14, "Peach", 8.7, 43, None,
                          ("Facial expressions begin",)),
        DevelopmentRecord(16, "Avocado", 11.6, 100, None,
                          ("Eyes start to move",)),
        DevelopmentRecord(18, "Bell pepper", 14.2, 190, None,
                          ("Ears reach their final position",)),
        DevelopmentRecord(20, "Banana", 16.4, 300, _UNSPLASH.format("1571771894821-ce9b6c11b08e"),
                          ("Movements can be felt",)),
        DevelopmentRecord(22, "Papaya", 27.8, 430, None,
                          ("Eyebrows and eyelids are formed",)),
        DevelopmentRecord(24, "Corn", 30, 600, _UNSPLASH.format("1551754655-cd27e38d2076"),
                          ("Hearing developed", "Lungs developing", "Can hear your voice")),
        DevelopmentRecord(26, "Lettuce", 35.6, 760, None,
                          ("Eyes begin to open",)),
        DevelopmentRecord(28, "Eggplant", 37.6, 1000, None,
                          ("Sleep cycles established",)),
        DevelopmentRecord(30, "Cabbage", 39.9, 1300, None,
                          ("Bone marrow makes red blood cells",)),
        DevelopmentRecord(32, "Coconut", 42.4, 1700, _UNSPLASH.format("1449824913935-59a10b8d2000"),
                          ("Lungs nearly mature",)),
        DevelopmentRecord(34, "Cantaloupe", 45, 2100, None,
                          ("Central nervous system maturing",)),
        DevelopmentRecord(36, "Romaine lettuce", 47.4, 2600, None,
                          ("Settling into birth position",)),
        DevelopmentRecord(38, "Pumpkin", 49.8, 3100, None,
                          ("Organs ready for life outside the womb",)),
        DevelopmentRecord(40, "Watermelon", 51.2, 3400, None,
                          ("Full term",)),
    )
}


def resolve(week: int, table: Mapping[int, DevelopmentRecord], floor: int = EARLY_WEEK_FLOOR) -> DevelopmentRecord:
    """
    Record for ``week``: exact key, else the placeholder for weeks at or below
    ``floor``, else the nearest key (ties go to the lower week).
    """
    if week in table:
        return table[week]
    if week <= floor or not table:
        return replace(TOO_EARLY_RECORD, week=max(week, 0))
    # min() keeps the first minimal key, so ascending order breaks ties low
    nearest = min(sorted(table), key=lambda key: abs(key - week))
    return table[nearest]


def development_table() -> Mapping[int, DevelopmentRecord]:
    """Seeded ``baby_development`` rows, or the built-in table when none exist."""
    from bumptrack.models import BabyDevelopment

    rows = BabyDevelopment.query.order_by(BabyDevelopment.week.asc()).all()
    if not rows:
        return FALLBACK_TABLE
    return {row.week: row.to_record() for row in rows}
