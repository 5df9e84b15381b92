"""Exceptions raised by the recommender package."""


class RecommenderError(Exception):
    """Base class for recommender errors."""


class InvalidCandidateList(RecommenderError, TypeError):
    """The candidate collection is not a sequence of article mappings."""
