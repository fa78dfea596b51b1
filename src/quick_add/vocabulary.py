"""Fixed lookup tables used by the quick-add parser."""

WEEKDAYS = [
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
]

MONTHS = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]

TIME_OF_DAY = {
    "morning": "09:00",
    "afternoon": "14:00",
    "evening": "18:00",
    "night": "20:00",
    "tonight": "20:00",
}

RELATIVE_DAYS = {
    "yesterday": -1,
    "today": 0,
    "tomorrow": 1,
}

PRIORITY_KEYWORDS = {
    "urgent": "high",
    "important": "high",
    "high priority": "high",
    "asap": "high",
    "!!": "high",
    "low priority": "low",
    "later": "low",
    "when possible": "low",
}

CATEGORIES = [
    "meeting", "call", "email", "review", "research", "buy", "read",
    "write", "plan", "study", "exercise", "workout", "appointment", "deadline",
]

QUICK_EXAMPLES = [
    "Call John at 2pm tomorrow",
    "Meeting with team this Friday at 10am",
    "Buy groceries today",
    "Review project deadline next week",
    "Workout at gym 6pm #fitness",
    "Email client urgent response needed",
    "Read book for 30 minutes",
    "Plan vacation next month",
]
