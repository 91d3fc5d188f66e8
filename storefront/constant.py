"""Editable static catalog, translation strings and option constants."""

from __future__ import annotations

from typing import Any

# Group name used for products whose options are not grouped.
GENERIC_OPTIONS_GROUP = "Options"
LEGACY_GROUP_ID = "legacy-group"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "options": "Options",
        "select_option": "Please select",
        "add_to_order": "Add to order",
        "your_order": "Your order",
        "empty_cart": "(cart is empty)",
        "subtotal": "Subtotal",
        "total": "Total",
        "checkout_done": "Show this order to the waiter. Total: {total}",
        "commission_display": "Service charge {percentage}%",
        "unavailable": "Not available",
        "added": "Added: {name}",
    },
    "ru": {
        "options": "Опции",
        "select_option": "Пожалуйста, выберите",
        "add_to_order": "Добавить в заказ",
        "your_order": "Ваш заказ",
        "empty_cart": "(корзина пуста)",
        "subtotal": "Подытог",
        "total": "Итого",
        "checkout_done": "Покажите заказ официанту. Итого: {total}",
        "commission_display": "Обслуживание {percentage}%",
        "unavailable": "Нет в наличии",
        "added": "Добавлено: {name}",
    },
    "kz": {
        "options": "Опциялар",
        "select_option": "Таңдаңыз",
        "add_to_order": "Тапсырысқа қосу",
        "your_order": "Сіздің тапсырысыңыз",
        "empty_cart": "(себет бос)",
        "subtotal": "Аралық сома",
        "total": "Барлығы",
        "checkout_done": "Тапсырысты даяшыға көрсетіңіз. Барлығы: {total}",
        "commission_display": "Қызмет көрсету {percentage}%",
        "unavailable": "Қолжетімсіз",
        "added": "Қосылды: {name}",
    },
}

_SIZE_OPTIONS: list[dict[str, Any]] = [
    {
        "id": "size",
        "name": "Size",
        "type": "single",
        "choices": [
            {"name": "S", "price": 0},
            {"name": "M", "price": 500},
            {"name": "L", "price": 1000},
        ],
    }
]

_PIZZA_OPTIONS: list[dict[str, Any]] = [
    {
        "id": "crust",
        "name": "Crust",
        "type": "single",
        "choices": [
            {"name": "Thin", "price": 0},
            {"name": "Classic", "price": 0},
            {"name": "Cheese edge", "price": 400},
        ],
    },
    {
        "id": "extras",
        "name": "Extras",
        "type": "multiple",
        "choices": [
            {"name": "Mushrooms", "price": 300},
            {"name": "Jalapeno", "price": 200},
            {"name": "Extra cheese", "price": 450},
        ],
    },
]

# Legacy flat options, kept in the seed to exercise normalization.
_DRINK_OPTIONS: list[dict[str, Any]] = [
    {"name": "Ice", "price": 0},
    {"name": "Lemon", "price": 100},
]

RESTAURANT: dict[str, Any] = {
    "id": "kulsary",
    "name": "Kulsary",
    "slug": "kulsary",
    "commission_percentage": 10,
}

KITCHENS: list[dict[str, Any]] = [
    {"id": "main", "name_en": "Kitchen", "name_ru": "Кухня", "name_kz": "Ас үй", "sort_order": 0},
    {"id": "bar", "name_en": "Bar", "name_ru": "Бар", "name_kz": "Бар", "sort_order": 1},
]

CATEGORIES: list[dict[str, Any]] = [
    {"id": "burgers", "kitchen_id": "main", "name_en": "Burgers", "name_ru": "Бургеры", "name_kz": "Бургерлер", "sort_order": 0},
    {"id": "pizza", "kitchen_id": "main", "name_en": "Pizza", "name_ru": "Пицца", "name_kz": "Пицца", "sort_order": 1},
    {"id": "sushi", "kitchen_id": "main", "name_en": "Sushi", "name_ru": "Суши", "name_kz": "Суши", "sort_order": 2},
    {"id": "desserts", "kitchen_id": "main", "name_en": "Desserts", "name_ru": "Десерты", "name_kz": "Тәттілер", "sort_order": 3},
    {"id": "drinks", "kitchen_id": "bar", "name_en": "Drinks", "name_ru": "Напитки", "name_kz": "Сусындар", "sort_order": 0},
]

PRODUCTS: list[dict[str, Any]] = [
    {"id": "cheeseburger", "category_id": "burgers", "name_en": "Cheeseburger", "name_ru": "Чизбургер", "name_kz": "Чизбургер", "price": 1500, "options": _SIZE_OPTIONS},
    {"id": "double_burger", "category_id": "burgers", "name_en": "Double Burger", "name_ru": "Двойной Бургер", "name_kz": "Екі еселенген Бургер", "price": 2500, "options": _SIZE_OPTIONS},
    {"id": "chicken_burger", "category_id": "burgers", "name_en": "Chicken Burger", "name_ru": "Куриный Бургер", "name_kz": "Тауық Бургері", "price": 1400},
    {"id": "spicy_burger", "category_id": "burgers", "name_en": "Spicy Burger", "name_ru": "Острый Бургер", "name_kz": "Ащы Бургер", "price": 1800},
    {"id": "margherita", "category_id": "pizza", "name_en": "Margherita", "name_ru": "Маргарита", "name_kz": "Маргарита", "price": 2000, "options": _PIZZA_OPTIONS},
    {"id": "pepperoni", "category_id": "pizza", "name_en": "Pepperoni", "name_ru": "Пепперони", "name_kz": "Пепперони", "price": 2400, "options": _PIZZA_OPTIONS},
    {"id": "four_cheese", "category_id": "pizza", "name_en": "Four Cheese", "name_ru": "Четыре Сыра", "name_kz": "Төрт Ірімшік", "price": 2600},
    {"id": "california_roll", "category_id": "sushi", "name_en": "California Roll", "name_ru": "Калифорния", "name_kz": "Калифорния", "price": 1800},
    {"id": "philadelphia_roll", "category_id": "sushi", "name_en": "Philadelphia Roll", "name_ru": "Филадельфия", "name_kz": "Филадельфия", "price": 2200},
    {"id": "dragon_roll", "category_id": "sushi", "name_en": "Dragon Roll", "name_ru": "Дракон", "name_kz": "Айдаһар", "price": 2800, "is_available": False},
    {"id": "cheesecake", "category_id": "desserts", "name_en": "Cheesecake", "name_ru": "Чизкейк", "name_kz": "Чизкейк", "price": 1200},
    {"id": "tiramisu", "category_id": "desserts", "name_en": "Tiramisu", "name_ru": "Тирамису", "name_kz": "Тирамису", "price": 1500},
    {"id": "cola", "category_id": "drinks", "name_en": "Cola", "name_ru": "Кола", "name_kz": "Кола", "price": 500, "options": _DRINK_OPTIONS},
    {"id": "lemonade", "category_id": "drinks", "name_en": "Lemonade", "name_ru": "Лимонад", "name_kz": "Лимонад", "price": 800, "options": _DRINK_OPTIONS},
    {"id": "ice_tea", "category_id": "drinks", "name_en": "Ice Tea", "name_ru": "Холодный Чай", "name_kz": "Салқын Шай", "price": 600},
    {"id": "water", "category_id": "drinks", "name_en": "Water", "name_ru": "Вода", "name_kz": "Су", "price": 300},
]
