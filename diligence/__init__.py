"""Diligence Script Engine: tailored technical due-diligence questionnaires."""

__version__ = "0.1.0"
