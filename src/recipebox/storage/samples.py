"""Sample recipes seeded into an empty recipe store."""

from typing import Any

SAMPLE_RECIPES: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Spaghetti Carbonara",
        "category": "Pasta",
        "servings": "4",
        "prepTime": "15 mins",
        "cookTime": "20 mins",
        "ingredients": [
            "400g spaghetti",
            "200g pancetta",
            "4 eggs",
            "100g parmesan cheese",
            "Salt and black pepper",
        ],
        "instructions": [
            "Cook spaghetti according to package directions",
            "Fry pancetta until crispy",
            "Beat eggs with parmesan",
            "Toss hot pasta with pancetta and egg mixture",
            "Season and serve immediately",
        ],
    },
    {
        "id": 2,
        "name": "Chicken Tikka Masala",
        "category": "Indian",
        "servings": "6",
        "prepTime": "30 mins",
        "cookTime": "40 mins",
        "ingredients": [
            "800g chicken breast",
            "400ml coconut cream",
            "400g crushed tomatoes",
            "2 tbsp tikka masala paste",
            "Rice for serving",
        ],
        "instructions": [
            "Marinate chicken in tikka paste",
            "Grill chicken until charred",
            "Make sauce with tomatoes and cream",
            "Add chicken to sauce",
            "Simmer and serve with rice",
        ],
    },
    {
        "id": 3,
        "name": "Beef Tacos",
        "category": "Mexican",
        "servings": "4",
        "prepTime": "10 mins",
        "cookTime": "15 mins",
        "ingredients": [
            "500g ground beef",
            "Taco shells",
            "Lettuce, tomatoes, cheese",
            "Taco seasoning",
            "Sour cream",
        ],
        "instructions": [
            "Brown the ground beef",
            "Add taco seasoning and water",
            "Simmer until thickened",
            "Serve in taco shells with toppings",
        ],
    },
]
