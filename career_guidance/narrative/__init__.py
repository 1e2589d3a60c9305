"""Narrative analysis: external-service outcomes and the local fallback."""
