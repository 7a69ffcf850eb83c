from ui.handlers.intent_handler import IntentHandler

__all__ = ["IntentHandler"]
