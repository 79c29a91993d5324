# ABOUTME: Wiki Visualizer - chart the tabular data published on wiki pages
# ABOUTME: Extracts template-delimited wikitables and {{dataset}} entries into chart descriptors

__version__ = "1.0.0"
