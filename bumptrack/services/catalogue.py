# bumptrack/services/catalogue.py
"""Starter exercise and recipe catalogue loaded by ``flask seed-catalogue``."""

EXERCISES = (
    {
        "name": "Prenatal breathing",
        "description": "Slow diaphragmatic breathing to ease tension.",
        "duration": 10,
        "difficulty": "easy",
        "trimester": "all",
        "category": "breathing",
        "instructions": "Sit tall, breathe in for four counts, out for six.",
    },
    {
        "name": "Gentle walking",
        "description": "Low-impact cardio that keeps circulation going.",
        "duration": 30,
        "difficulty": "easy",
        "trimester": "all",
        "category": "cardio",
        "instructions": "Walk at a pace where you can still hold a conversation.",
    },
    {
        "name": "Wall squats",
        "description": "Strengthens legs and pelvic floor for labour.",
        "duration": 15,
        "difficulty": "medium",
        "trimester": "second",
        "category": "strength",
        "instructions": "Back against the wall, slide down slowly, hold, rise.",
    },
    {
        "name": "Cat-cow stretch",
        "description": "Relieves lower back pain late in pregnancy.",
        "duration": 10,
        "difficulty": "easy",
        "trimester": "third",
        "category": "flexibility",
        "instructions": "On hands and knees, alternate arching and rounding the back.",
    },
)

RECIPES = (
    {
        "title": "Ginger oat porridge",
        "description": "Settles morning nausea.",
        "ingredients": ["1 cup oats", "2 cups milk", "1 tsp grated ginger", "1 banana"],
        "instructions": ["Simmer oats in milk", "Stir in ginger", "Top with sliced banana"],
        "prep_time": 5,
        "cook_time": 10,
        "servings": 2,
        "category": "breakfast",
        "nutrition_benefits": "Fibre, and ginger for nausea.",
        "trimester": "first",
    },
    {
        "title": "Lentil and spinach soup",
        "description": "Iron and folate in one bowl.",
        "ingredients": ["1 cup red lentils", "2 cups spinach", "1 onion", "1 l vegetable stock"],
        "instructions": ["Soften onion", "Add lentils and stock, simmer 20 min", "Stir in spinach"],
        "prep_time": 10,
        "cook_time": 25,
        "servings": 4,
        "category": "lunch",
        "nutrition_benefits": "Iron, folate and protein.",
        "trimester": "all",
    },
    {
        "title": "Baked salmon with sweet potato",
        "description": "Omega-3 for baby's brain development.",
        "ingredients": ["2 salmon fillets", "2 sweet potatoes", "olive oil", "lemon"],
        "instructions": ["Roast cubed sweet potato 20 min", "Add salmon, bake 12 min more", "Finish with lemon"],
        "prep_time": 10,
        "cook_time": 32,
        "servings": 2,
        "category": "dinner",
        "nutrition_benefits": "Omega-3 fatty acids, vitamin A.",
        "trimester": "third",
    },
)
