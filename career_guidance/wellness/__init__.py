"""Wellness scoring, insight rules and check-in analytics."""
