"""
Rule-based help assistant for the kiosk.

Messages are matched against keyword patterns in a fixed priority order
(greeting, combos, kiosk help, store info, other inquiries); the first
match wins. Kiosk help and store info carry a sub-topic that picks the
answer.
"""
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from django.conf import settings

logger = logging.getLogger(__name__)


class Intent(str, Enum):
    GREETING = "greeting"
    COMBO_INFO = "combo_info"
    KIOSK_HELP = "kiosk_help"
    GENERAL_INQUIRY = "general_inquiry"
    OTHER_INQUIRIES = "other_inquiries"
    UNKNOWN = "unknown"


ASK_COMBOS = "Tell me about combos"
ASK_ADD_ITEM = "How to add an item"
ASK_HOURS = "What are your hours?"
ASK_LOCATION = "Where are you located?"
ASK_OTHER = "Other inquiries"

INTENT_PATTERNS: Tuple[Tuple[Intent, "re.Pattern[str]"], ...] = (
    (Intent.GREETING, re.compile(r"^(hi|hello|hey)\b")),
    (Intent.COMBO_INFO, re.compile(r"combo|meal options|combos")),
    (Intent.KIOSK_HELP, re.compile(r"how to|help with|i need help with|add an item|remove an item|checkout")),
    (Intent.GENERAL_INQUIRY, re.compile(r"hours|location|open|address|find you|where are you")),
    (Intent.OTHER_INQUIRIES, re.compile(r"other inquiries?")),
)

KIOSK_TOPICS = (
    ("add_item", re.compile(r"add|order|select|add an item")),
    ("remove_item", re.compile(r"remove|delete|cancel|remove an item")),
    ("checkout", re.compile(r"checkout|pay|finish|complete")),
)

INQUIRY_TOPICS = (
    ("hours", re.compile(r"hours|open|close|closing")),
    ("location", re.compile(r"location|address|find you|where are you")),
)

FOLLOW_UPS: Dict[Intent, List[str]] = {
    Intent.GREETING: [ASK_COMBOS, ASK_ADD_ITEM, ASK_HOURS, ASK_LOCATION],
    Intent.COMBO_INFO: [ASK_ADD_ITEM, ASK_HOURS, ASK_LOCATION, ASK_OTHER],
    Intent.KIOSK_HELP: [ASK_COMBOS, ASK_HOURS, ASK_LOCATION, ASK_OTHER],
    Intent.GENERAL_INQUIRY: [ASK_COMBOS, ASK_ADD_ITEM, ASK_OTHER],
    Intent.OTHER_INQUIRIES: [ASK_COMBOS, ASK_ADD_ITEM, ASK_HOURS, ASK_LOCATION],
    Intent.UNKNOWN: [ASK_COMBOS, ASK_ADD_ITEM, ASK_HOURS, ASK_LOCATION],
}

COMBO_INFO = (
    "At Panda Express, we offer several combo options:\n\n"
    "- **Bowl**: Choose 1 side and 1 entree.\n"
    "- **Plate**: Choose 1 side and 2 entrees.\n"
    "- **Bigger Plate**: Choose 1 side and 3 entrees.\n\n"
    "To select a combo, tap on the 'Combos' category and choose the option you prefer."
)

KIOSK_HELP = {
    "add_item": "To add an item to your order, navigate to the desired category and tap on the item you want to add.",
    "remove_item": (
        "To remove an item from your order, tap on the cart icon, find the item you wish "
        "to remove, and tap the remove button."
    ),
    "checkout": 'When you are ready to complete your order, tap on the cart icon and then tap the "Checkout" button.',
    None: "How can I assist you with using the kiosk? You can ask about adding items, removing items, or checking out.",
}


@dataclass(frozen=True)
class ChatReply:
    intent: Intent
    response: str
    options: List[str] = field(default_factory=list)
    topic: Optional[str] = None

    def to_dict(self) -> dict:
        return {"response": self.response, "options": list(self.options)}


def _match_topic(text: str, topics) -> Optional[str]:
    for name, pattern in topics:
        if pattern.search(text):
            return name
    return None


class ChatbotEngine:
    @staticmethod
    def identify_intent(text: str) -> Intent:
        for intent, pattern in INTENT_PATTERNS:
            if pattern.search(text):
                return intent
        return Intent.UNKNOWN

    @staticmethod
    def extract_topic(intent: Intent, text: str) -> Optional[str]:
        if intent == Intent.KIOSK_HELP:
            return _match_topic(text, KIOSK_TOPICS)
        if intent == Intent.GENERAL_INQUIRY:
            return _match_topic(text, INQUIRY_TOPICS)
        return None

    @staticmethod
    def general_inquiry(topic: Optional[str]) -> str:
        if topic == "hours":
            return f"Our store hours are from {settings.STORE_HOURS}."
        if topic == "location":
            return f"We are located at {settings.STORE_ADDRESS}."
        return (
            "What would you like to know? I can assist with questions about store hours, "
            "location, and using the kiosk."
        )

    @staticmethod
    def reply(message: Optional[str]) -> ChatReply:
        text = (message or "").lower().strip()
        intent = ChatbotEngine.identify_intent(text)
        topic = ChatbotEngine.extract_topic(intent, text)

        if intent == Intent.GREETING:
            response = "Welcome to Panda Express! How can I assist you with navigating the kiosk today?"
        elif intent == Intent.COMBO_INFO:
            response = COMBO_INFO
        elif intent == Intent.KIOSK_HELP:
            response = KIOSK_HELP[topic]
        elif intent == Intent.GENERAL_INQUIRY:
            response = ChatbotEngine.general_inquiry(topic)
        elif intent == Intent.OTHER_INQUIRIES:
            response = f"For other inquiries, please call us at {settings.STORE_PHONE}."
        else:
            response = "I'm here to help you navigate the kiosk. Could you please specify how I can assist you?"

        logger.debug(f"Chatbot intent={intent.value} topic={topic}")
        return ChatReply(intent=intent, response=response, options=FOLLOW_UPS[intent], topic=topic)
