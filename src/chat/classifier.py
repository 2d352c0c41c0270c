"""
Keyword-based intent classification and canned assistant replies.

The same classifier tags a message when it is stored and picks the reply,
so both always agree.
"""

from typing import Dict, Tuple

ROUTE_REQUEST = "route_request"
FARE_INQUIRY = "fare_inquiry"
QUERY = "query"

INTENTS = (QUERY, ROUTE_REQUEST, FARE_INQUIRY)

# Checked in order, first match wins
INTENT_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (ROUTE_REQUEST, ("route", "reach", "go to")),
    (FARE_INQUIRY, ("fare", "cost", "price")),
)

RESPONSES: Dict[str, str] = {
    ROUTE_REQUEST: (
        "Based on current traffic conditions, I recommend taking the Metro Line 1 to "
        "Central Station, then Bus 42A to your destination. This route takes about "
        "32 minutes and costs ₹45. You'll arrive 10 minutes early!"
    ),
    FARE_INQUIRY: (
        "The most cost-effective option is Bus 15 for ₹25. If you prefer faster travel, "
        "Metro + Bus combination costs ₹45 but saves 16 minutes."
    ),
    QUERY: (
        "I can help you with route planning, fare comparisons, real-time delays, and "
        "transport schedules. What would you like to know?"
    ),
}


def classify(text: str) -> str:
    lowered = text.lower()
    for intent, keywords in INTENT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return intent
    return QUERY


def respond(intent: str) -> str:
    """Canned reply for an intent; unknown intents get the general reply"""
    return RESPONSES.get(intent, RESPONSES[QUERY])
