"""
Plant care application layer (commands, queries, handlers).
"""
