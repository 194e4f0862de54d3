"""
Shared building blocks of the food ordering backend: configuration, database,
models, validation and business services.
"""
