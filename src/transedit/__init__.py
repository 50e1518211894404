"""
transedit - translation file editing toolkit

transedit keeps per-locale, per-namespace translation files (JSON, YAML,
CSV) structurally consistent and reorganizes entries across them with
path-addressed edits.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
