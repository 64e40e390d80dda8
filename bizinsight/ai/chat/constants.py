"""
Chat constants: fixed texts and sampling parameters.
"""

from enum import Enum


class Sender(str, Enum):
    """Who authored a chat message."""

    USER = "user"
    BOT = "bot"


CHAT_TEMPERATURE = 0.7

# Starter questions are offered while the conversation is this short
STARTER_QUESTION_MAX_MESSAGES = 3

WELCOME_MESSAGE = (
    "Hello! I'm your Business Insights Assistant. \n\n"
    "I can analyze your data and provide strategic advice. Update your business "
    "metrics in the sidebar for personalized insights, or just ask me a question "
    "to get started!"
)

EMPTY_RESPONSE_MESSAGE = "I couldn't generate a response. Please try again."

ERROR_MESSAGE = (
    "I encountered an error processing your request. "
    "Please ensure your API key is valid and try again."
)

STARTER_QUESTIONS = [
    "Why are my sales decreasing?",
    "How can I reduce my operating costs?",
    "What is a good marketing strategy for my industry?",
    "Perform a SWOT analysis based on my numbers.",
]
