"""Closed set of product categories a material code can be classified into."""

from __future__ import annotations

from enum import Enum


class CategoryLabel(str, Enum):
    """Product category shown on consolidated reports."""

    freezer = "Freezer"
    refrigerator = "Refrigerator"
    tv = "TV"
    drum_washing_machine = "Drum Washing Machine"
    washing_machine = "Washing Machine"
    home_air_conditioner = "Home Air Conditioner"
    commercial_ac = "Commercial AC"
    commercial_washer = "Commercial Washer"
    small_appliances = "Small Appliances"
    cooktop = "Cooktop"
    cooker = "Cooker"
    range_hood = "Range Hood"
    water_heater = "Water Heater"
    microwave_oven = "Micro-wave Oven"
    water_system = "Water System"
    others = "Others"


FALLBACK_CATEGORY = CategoryLabel.others
