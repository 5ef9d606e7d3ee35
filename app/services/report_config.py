import operator

# Each rule is checked on its own, so overlapping bands all fire
# (an average of 8 earns both answer-score strengths).
STRENGTH_RULES = [
    {
        "metric": "avg_answer_score",
        "compare": operator.ge,
        "threshold": 7,
        "statement": "Strong technical knowledge demonstrated across questions",
    },
    {
        "metric": "avg_answer_score",
        "compare": operator.ge,
        "threshold": 5,
        "statement": "Decent understanding of core concepts",
    },
    {
        "metric": "avg_eye_score",
        "compare": operator.ge,
        "threshold": 70,
        "statement": "Good eye contact and confident presence",
    },
    {
        "metric": "avg_eye_score",
        "compare": operator.ge,
        "threshold": 80,
        "statement": "Excellent non-verbal communication",
    },
]

IMPROVEMENT_RULES = [
    {
        "metric": "avg_answer_score",
        "compare": operator.lt,
        "threshold": 7,
        "statement": "Deepen technical knowledge with hands-on practice projects",
    },
    {
        "metric": "avg_answer_score",
        "compare": operator.lt,
        "threshold": 5,
        "statement": "Study fundamentals more thoroughly before the next round",
    },
    {
        "metric": "avg_eye_score",
        "compare": operator.lt,
        "threshold": 70,
        "statement": "Practice maintaining eye contact, it signals confidence",
    },
    {
        "metric": "total_questions",
        "compare": operator.lt,
        "threshold": 10,
        "statement": "Complete all questions for a full assessment next time",
    },
]
