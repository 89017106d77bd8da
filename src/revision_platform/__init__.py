"""Revision Platform - AI-assisted revision notes, assessments and chat."""

__version__ = "1.0.0"
