"""
Offline symptom triage used when no live model reply is available.

Pure keyword rules, case-insensitive, no network. The output is advisory
text for the user, never a value other code should branch on.
"""
import re
from typing import List

RED_FLAGS = (
    "chest pain",
    "shortness of breath",
    "severe bleeding",
    "loss of consciousness",
    "stroke",
    "numbness on one side",
    "suicidal",
)

EMERGENCY_ADVICE = (
    "Your description contains potential emergency symptoms. Please call your local "
    "emergency number or go to the nearest emergency department immediately."
)
FEVER_ADVICE = "Hydrate well and consider acetaminophen per label dosing if appropriate for you."
THROAT_ADVICE = "Warm fluids, rest, and consider honey or lozenges. Monitor breathing difficulty."
HEADACHE_ADVICE = "Limit screen time, rest in a dark room, and hydrate. Track triggers."
CLARIFYING_QUESTION = (
    "Could you share onset, severity (1–10), location, and any triggers or relieving factors?"
)
SAFETY_CLOSING = (
    "If symptoms worsen, persist beyond 48–72 hours, or you have underlying conditions, "
    "seek in-person medical care."
)

# "38", "38.5" and "385" all read as a Celsius temperature
_FEVER_RE = re.compile(r"\b(fever|temperature|38\.?[0-9]?|high temp)\b")


def analyze_symptoms(text: str) -> str:
    lower = (text or "").lower()

    # a red flag short-circuits everything else
    if any(flag in lower for flag in RED_FLAGS):
        return EMERGENCY_ADVICE

    suggestions: List[str] = []
    if _FEVER_RE.search(lower):
        suggestions.append(FEVER_ADVICE)
    if "cough" in lower or "throat" in lower:
        suggestions.append(THROAT_ADVICE)
    if "headache" in lower:
        suggestions.append(HEADACHE_ADVICE)
    if not suggestions:
        suggestions.append(CLARIFYING_QUESTION)

    return " ".join(suggestions) + " " + SAFETY_CLOSING
