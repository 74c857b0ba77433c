"""
Regex history module.

This module provides pattern validation, matching with usage recording, and
the in-memory history store behind the regex tester. Import components from
their modules, e.g. `from RegexHistory.HistoryQueryFacade import HistoryQueryFacade`.
"""
