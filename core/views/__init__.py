from .default import health_check

__all__ = ["health_check"]
