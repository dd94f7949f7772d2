"""Small games: Truco against the computer, a maze chase, a taxi dodger and a search visualiser."""

__version__ = "0.1.0"