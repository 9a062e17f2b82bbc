"""Count the words of a text and order them by how often they occur."""

__version__ = "0.1.0"