"""Toggl API access for toggler."""

from .client import TogglClient, TogglAPIError, CREATED_WITH

__all__ = ['TogglClient', 'TogglAPIError', 'CREATED_WITH']
