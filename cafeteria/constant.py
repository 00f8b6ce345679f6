"""Editable static seed data."""

from __future__ import annotations

# (id, name, category, price, stock)
SAMPLE_MENU_ROWS: list[tuple[int, str, str, str, int]] = [
    (1, "Veggie Burger", "Vegetarian", "8.99", 25),
    (2, "Veggie Wrap", "Vegetarian", "7.49", 20),
    (3, "Grilled Cheese Sandwich", "Vegetarian", "5.99", 30),
    (4, "Vegetable Stir Fry", "Vegetarian", "9.49", 18),
    (5, "Vegan Buddha Bowl", "Vegan", "10.99", 15),
    (6, "Vegan Tacos", "Vegan", "8.49", 20),
    (7, "Vegan Quinoa Salad", "Vegan", "9.29", 12),
    (8, "Vegan Chili", "Vegan", "7.99", 25),
    (9, "Gluten-Free Margherita Pizza", "Gluten-Free", "11.49", 10),
    (10, "Grilled Chicken Salad (Gluten-Free)", "Gluten-Free", "10.99", 18),
]

MAIN_MENU_OPTIONS: dict[int, str] = {
    1: "Display Menu",
    2: "Add Menu Item",
    3: "Update Menu Item",
    4: "Remove Menu Item",
    5: "Add Customer",
    6: "Remove Customer",
    7: "Place Order",
    0: "Exit",
}

ORDER_SENTINEL = -1
