from .service import MarketplaceService

__all__ = ["MarketplaceService"]
