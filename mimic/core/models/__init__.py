"""
Domain models: Pydantic types for the generator.

    from mimic.core.models import GeneratorConfig
"""

from mimic.core.models.config import GeneratorConfig

__all__ = [
    "GeneratorConfig",
]
