"""QuizWizard trivia quiz service and command-line client."""

__version__ = "1.0.0"
