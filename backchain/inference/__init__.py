from .backward import BackwardChainer, ask

__all__ = [
    "BackwardChainer", "ask",
]
