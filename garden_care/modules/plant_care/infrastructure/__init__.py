"""
Plant care infrastructure: SQL repositories, in-process caches and the content generator.
"""
