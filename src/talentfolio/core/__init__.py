"""Core configuration and cross-cutting utilities for Talentfolio."""
