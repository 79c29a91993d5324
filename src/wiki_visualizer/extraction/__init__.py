# ABOUTME: Page source retrieval from MediaWiki projects
# ABOUTME: Pipeline stage 1: page title and project host -> raw wikitext

"""
Extraction Layer: Get raw page markup from wiki projects

Data Flow: MediaWiki API -> raw wikitext -> markup layer
"""

from .base import PageSourceProvider, project_domain

__all__ = [
    "PageSourceProvider",
    "project_domain",
]
