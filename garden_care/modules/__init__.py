"""
Garden care feature modules.
"""
