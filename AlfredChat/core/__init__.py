"""
Core package for AlfredChat.
Holds the session state, message model, logging and the terminal client.
"""
