"""
Unit Tests

Tests for individual components and functions:
- cache_manager.py: corpus cache TTL and sweep
- sentence_pipeline.py: fetch_sentence end to end with a lexicon tagger
- config_loader.py: YAML cascade and env overrides
"""
