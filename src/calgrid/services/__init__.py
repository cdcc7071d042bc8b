"""
Services package.
"""

from .calendar_service import CalendarService, build_calendar

__all__ = ['CalendarService', 'build_calendar']
