"""meow: a console chatbot that keeps a personal task list in a flat file."""

__version__ = "0.1.0"
