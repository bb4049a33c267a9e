# Use Cases Package
from .configure_job import ConfigureJobUseCase

__all__ = ["ConfigureJobUseCase"]
