"""Greeting service package.

Serves a fixed plain-text greeting to every HTTP request.
"""
