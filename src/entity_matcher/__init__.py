"""
entity_matcher
==============

Does: Root package for the entity-name comparison engine.
Returns: Subpackages under `entity_matcher.engine`; the CLI lives in `entity_matcher.demo`.
Used by: All imports starting from `entity_matcher.*`.
"""

__all__: list[str] = []
__version__ = "0.1.0"
__docformat__ = "google"
