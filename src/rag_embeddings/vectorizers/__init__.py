"""Vectorizers package."""

from .base import BaseVectorizer
from .ollama_vectorizer import OllamaVectorizer

__all__ = ["BaseVectorizer", "OllamaVectorizer"]
