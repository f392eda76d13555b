"""Spoken texts and card titles used by the skill responses."""

TITLE_MESSAGE = "AWS Services"
GREETING_MESSAGE = (
    "Welcome to the AWS services guide. "
    "Ask me about a service, for example, tell me about EC2."
)
REPROMPT_MESSAGE = (
    "Which AWS service would you like to hear about? You can say Lambda, EC2 or BeanStalk."
)
HELP_MESSAGE = (
    "I can describe AWS services for you. "
    "Ask about Lambda, EC2 or BeanStalk, for example, tell me about Lambda."
)
GOODBYE_MESSAGE = "Thank you for using the AWS services guide. Goodbye!"

HELP_CARD_TITLE = "Session help"
SESSION_ENDED_CARD_TITLE = "Session Ended"

NOT_FOUND_MESSAGE = "No service found in our record"


__all__ = [
    "TITLE_MESSAGE",
    "GREETING_MESSAGE",
    "REPROMPT_MESSAGE",
    "HELP_MESSAGE",
    "GOODBYE_MESSAGE",
    "HELP_CARD_TITLE",
    "SESSION_ENDED_CARD_TITLE",
    "NOT_FOUND_MESSAGE",
]
