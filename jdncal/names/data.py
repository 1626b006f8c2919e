"""
Static weekday and month name tables.

Layout: ``NAMES[calendar]["weekdays" | "months"][locale][format]``. Weekday
lists start with Sunday. Hebrew month lists follow the internal 13-slot month
numbering (slot 6 is Adar, Adar I in leap years; slot 7 is Adar II).
"""

from typing import Dict, List

from jdncal.conventions.types import Calendar

NameTable = Dict[str, Dict[str, List[str]]]

_WEEKDAYS: NameTable = {
    "en": {
        "long": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
        "short": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        "narrow": ["S", "M", "T", "W", "T", "F", "S"],
    },
    "de": {
        "long": ["Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag"],
        "short": ["So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"],
        "narrow": ["S", "M", "D", "M", "D", "F", "S"],
    },
    "fr": {
        "long": ["dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"],
        "short": ["dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."],
    },
}

_SOLAR_MONTHS: NameTable = {
    "en": {
        "long": [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ],
        "short": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    },
    "de": {
        "long": [
            "Januar", "Februar", "März", "April", "Mai", "Juni",
            "Juli", "August", "September", "Oktober", "November", "Dezember",
        ],
        "short": ["Jan", "Feb", "Mär", "Apr", "Mai", "Jun", "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"],
    },
    "fr": {
        "long": [
            "janvier", "février", "mars", "avril", "mai", "juin",
            "juillet", "août", "septembre", "octobre", "novembre", "décembre",
        ],
        "short": [
            "janv.", "févr.", "mars", "avr.", "mai", "juin",
            "juil.", "août", "sept.", "oct.", "nov.", "déc.",
        ],
    },
}

_ISLAMIC_MONTHS: NameTable = {
    "en": {
        "long": [
            "Muharram", "Safar", "Rabi' al-awwal", "Rabi' al-thani",
            "Jumada al-awwal", "Jumada al-thani", "Rajab", "Sha'ban",
            "Ramadan", "Shawwal", "Dhu al-Qi'dah", "Dhu al-Hijjah",
        ],
        "short": [
            "Muh.", "Saf.", "Rab. I", "Rab. II", "Jum. I", "Jum. II",
            "Raj.", "Sha.", "Ram.", "Shaw.", "Dhu'l-Q.", "Dhu'l-H.",
        ],
    },
}

_HEBREW_MONTHS: NameTable = {
    "en": {
        "long": [
            "Tishri", "Heshvan", "Kislev", "Tevet", "Shevat", "Adar", "Adar II",
            "Nisan", "Iyar", "Sivan", "Tammuz", "Av", "Elul",
        ],
    },
    "de": {
        "long": [
            "Tischri", "Cheschwan", "Kislew", "Tevet", "Schevat", "Adar", "Adar II",
            "Nisan", "Ijjar", "Siwan", "Tammus", "Aw", "Elul",
        ],
    },
}

NAMES: Dict[Calendar, Dict[str, NameTable]] = {
    Calendar.GREGORIAN: {"weekdays": _WEEKDAYS, "months": _SOLAR_MONTHS},
    Calendar.JULIAN: {"weekdays": _WEEKDAYS, "months": _SOLAR_MONTHS},
    Calendar.ISLAMIC: {"weekdays": _WEEKDAYS, "months": _ISLAMIC_MONTHS},
    Calendar.HEBREW: {"weekdays": _WEEKDAYS, "months": _HEBREW_MONTHS},
}
