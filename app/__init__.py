"""
Listing optimizer: AI-generated product copy with sanitized, validated output
"""
__version__ = "1.0.0"
