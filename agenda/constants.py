RECURRENCE_NONE = "none"
RECURRENCE_KINDS = ["none", "daily", "weekly", "biweekly", "monthly", "yearly"]
RECURRING_KINDS = set(RECURRENCE_KINDS) - {RECURRENCE_NONE}

DEFAULT_LOOKAHEAD_DAYS = 30
DEFAULT_CALENDAR_WINDOW_DAYS = 42

TIME_FORMAT = "%H:%M"

DEFAULT_LOCALE = "es"

# Monday first, matching date.weekday().
DAY_NAMES = {
    "es": ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}
MONTH_ABBREVIATIONS = {
    "es": ["ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sept", "oct", "nov", "dic"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
}
TOMORROW_LABELS = {
    "es": "Mañana",
    "en": "Tomorrow",
}
ALL_DAY_LABELS = {
    "es": "Todo el día",
    "en": "All day",
}
NO_TIME_LABELS = {
    "es": "Sin hora",
    "en": "No time",
}
SUPPORTED_LOCALES = set(DAY_NAMES.keys())
