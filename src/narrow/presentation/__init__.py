"""Presentation layer - Textual front end and rich formatting for sessions.

Nothing in here holds session state; widgets render the ViewSnapshot the
session returns after each event and forward key presses as events.
"""
