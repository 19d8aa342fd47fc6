"""
Netflix titles analytics: Bronze ingestion, Silver conformance and the
fifteen analytical queries over the conformed titles table.
"""

__version__ = "0.1.0"
