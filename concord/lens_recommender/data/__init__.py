"""Static data tables for the lens recommender."""
