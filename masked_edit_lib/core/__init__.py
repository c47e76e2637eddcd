"""
Masking core: mask grammar, tagged buffer and the formatting engine.
"""
