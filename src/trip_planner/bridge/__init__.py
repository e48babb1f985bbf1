from .domain_bridge import AIEventOperations

__all__ = ["AIEventOperations"]
