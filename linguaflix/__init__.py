"""
Linguaflix - proficiency-appropriate sentences from TV show subtitles
"""

__version__ = "0.1.0"
