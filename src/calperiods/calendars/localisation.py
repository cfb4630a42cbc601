"""
calperiods.calendars.localisation
---------------------------------
Curated month/day labels per calendar. Standard calendars carry English
labels only; anything richer belongs to a locale-aware formatting layer.
The Nepali entries are the complete set of locales that calendar supports.
"""

from __future__ import annotations

from typing import Dict

from ..core.types import CalendarLocale

GREGORIAN = {
    "en": CalendarLocale(
        month_names=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
    ),
}

ETHIOPIC = {
    "en": CalendarLocale(
        month_names=(
            "Meskerem", "Tekemt", "Hedar", "Tahsas", "Ter", "Yekatit", "Megabit",
            "Miazia", "Genbot", "Sene", "Hamle", "Nehasse", "Pagume",
        ),
    ),
}

COPTIC = {
    "en": CalendarLocale(
        month_names=(
            "Thout", "Paopi", "Hathor", "Koiak", "Tobi", "Meshir", "Paremhat",
            "Parmouti", "Pashons", "Paoni", "Epip", "Mesori", "Pi Kogi Enavot",
        ),
    ),
}

ISLAMIC = {
    "en": CalendarLocale(
        month_names=(
            "Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani", "Jumada al-awwal", "Jumada al-thani",
            "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
        ),
    ),
}

PERSIAN = {
    "en": CalendarLocale(
        month_names=(
            "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
            "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
        ),
    ),
}

NEPALI = {
    "en": CalendarLocale(
        month_names=(
            "Baisakh", "Jestha", "Asar", "Shrawan", "Bhadra", "Ashwin",
            "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra",
        ),
        day_names_short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    ),
    "ne": CalendarLocale(
        month_names=(
            "बैशाख", "जेठ", "असार", "श्रावण", "भाद्र", "आश्विन",
            "कार्तिक", "मंसिर", "पौष", "माघ", "फाल्गुन", "चैत्र",
        ),
        day_names_short=("सोम", "मंगल", "बुध", "बिही", "शुक्र", "शनि", "आइत"),
        week_label="हप्ता",
        numerals="०१२३४५६७८९",
    ),
}

LOCALISATIONS: Dict[str, Dict[str, CalendarLocale]] = {
    "gregorian": GREGORIAN,
    "julian": GREGORIAN,
    "ethiopic": ETHIOPIC,
    "coptic": COPTIC,
    "islamic": ISLAMIC,
    "persian": PERSIAN,
    "nepali": NEPALI,
}
