from fulfillment.services.landing_page_service import LandingPageService
from fulfillment.services.purchase_confirmation import PurchaseConfirmationCoordinator

__all__ = ["LandingPageService", "PurchaseConfirmationCoordinator"]
