from .api_key import ApiKeyService

__all__ = ["ApiKeyService"]
