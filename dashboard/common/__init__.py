"""
Common Module
Gemeinsame Hilfsfunktionen für HTTP und Logging
"""
