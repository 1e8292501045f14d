"""TUI applications package.

Available applications:
- dashboard: namespace browser with pod, log and describe panels
"""
