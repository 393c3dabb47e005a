"""
Plant care domain layer: models, repository interfaces and services.
"""
