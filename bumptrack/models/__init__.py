# bumptrack/models/__init__.py
from .user import User
from .pregnancy import Pregnancy
from .baby_development import BabyDevelopment
from .weight_entry import WeightEntry
from .diary_entry import DiaryEntry
from .appointment import Appointment
from .kick_counter import KickCounter
from .symptom import Symptom
from .shopping_item import ShoppingItem
from .medication import Medication, MedicationLog
from .birth_plan import BirthPlan
from .community import CommunityPost, CommunityReply, CommunityLike
from .catalogue import Exercise, Recipe
