"""DSAGenie backend: LLM-written explanations, pseudocode and solutions for coding problems."""

__version__ = "1.0.0"
