"""
Linguaflix Test Suite

This package contains all tests for the Linguaflix project:
- unit/: Unit tests for individual components
- unit/core/: Unit tests for the subtitle-to-sentence pipeline stages
"""
