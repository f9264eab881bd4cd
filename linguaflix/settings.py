"""
Settings management for Linguaflix.

This module provides simple accessor functions for configuration values.
All configuration is stored in YAML files (default.yaml, config.yaml).
"""

import logging
from typing import Dict, Any, List

from .config import ConfigLoader
from .models import ProficiencyThreshold

logger = logging.getLogger(__name__)

# Single source of configuration
_config_loader = ConfigLoader()


# ============================================================================
# Section Accessors - Get entire configuration sections
# ============================================================================

def get_subtitle_config() -> Dict[str, Any]:
    """Get subtitle ingestion settings"""
    return _config_loader.get_section('subtitle') or {}


def get_cleaner_config() -> Dict[str, Any]:
    """Get line cleaner settings"""
    return _config_loader.get_section('cleaner') or {}


def get_segmenter_config() -> Dict[str, Any]:
    """Get sentence segmenter settings"""
    return _config_loader.get_section('segmenter') or {}


def get_analysis_config() -> Dict[str, Any]:
    """Get linguistic analysis settings"""
    return _config_loader.get_section('analysis') or {}


def get_cache_config() -> Dict[str, Any]:
    """Get corpus cache settings"""
    return _config_loader.get_section('cache') or {}


def get_show_catalog() -> Dict[str, str]:
    """
    Get the show catalog.

    Returns:
        Dict mapping '<show>-<lang>' keys to subtitle file paths
    """
    return _config_loader.get_section('shows') or {}


# ============================================================================
# Specific Accessors
# ============================================================================

def get_subtitle_encoding() -> str:
    """Get subtitle file encoding ('auto' enables detection)"""
    return get_subtitle_config().get('encoding', 'utf-8-sig')


def get_encoding_sample_size() -> int:
    """Get number of leading bytes inspected by encoding detection"""
    return int(get_subtitle_config().get('encoding_sample_size', 65536))


def get_spacy_model() -> str:
    """Get spaCy pipeline name used for POS tagging"""
    return get_analysis_config().get('spacy_model', 'en_core_web_sm')


def get_complex_word_length() -> int:
    """Get length above which a term counts as a complex word"""
    return int(get_analysis_config().get('complex_word_length', 6))


def get_analysis_max_workers() -> int:
    """Get number of threads used to analyze candidates (1 = serial)"""
    return max(1, int(get_analysis_config().get('max_workers', 1)))


def get_cache_default_ttl() -> int:
    """Get corpus cache TTL in seconds (default: 24 hours)"""
    return int(get_cache_config().get('default_ttl', 86400))


def get_cache_cleanup_interval() -> int:
    """Get corpus cache eviction sweep interval in seconds"""
    return int(get_cache_config().get('cleanup_interval', 120))


def get_cache_key_prefix() -> str:
    """Get prefix prepended to subtitle paths to build cache keys"""
    return get_cache_config().get('key_prefix', 'subtitle:')


def get_proficiency_thresholds() -> Dict[str, ProficiencyThreshold]:
    """
    Get proficiency tier thresholds.

    Returns:
        Dict mapping tier name to its ProficiencyThreshold
    """
    section = _config_loader.get_section('proficiency') or {}
    thresholds = {}
    for name, values in section.items():
        thresholds[name] = ProficiencyThreshold(name=name, **(values or {}))
    return thresholds


def get_proficiency_levels() -> List[str]:
    """Get configured proficiency tier names"""
    return list((_config_loader.get_section('proficiency') or {}).keys())


def reload() -> None:
    """Reload configuration from disk"""
    _config_loader.reload()
