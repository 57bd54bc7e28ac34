"""Django ORM implementation of the SubscriptionRepository."""

from fulfillment import models
from fulfillment.domain import (
    MarketplaceTerm,
    MarketplaceUser,
    SeatQuantity,
    Subscription,
    SubscriptionId,
    SubscriptionStatus,
)
from fulfillment.stores.interfaces import SubscriptionRepository


class DjangoSubscriptionRepository(SubscriptionRepository):
    """Relational subscription snapshot store using Django ORM."""

    def get_subscription(self, subscription_id: SubscriptionId) -> Subscription | None:
        row = models.Subscription.objects.filter(pk=subscription_id.value).first()
        if row is None:
            return None
        return _to_domain(row)

    def put_subscription(self, subscription: Subscription) -> None:
        models.Subscription.objects.update_or_create(
            subscription_id=subscription.subscription_id.value,
            defaults=_to_columns(subscription),
        )


def _to_domain(row: models.Subscription) -> Subscription:
    return Subscription(
        subscription_id=SubscriptionId(row.subscription_id),
        subscription_name=row.subscription_name,
        offer_id=row.offer_id,
        plan_id=row.plan_id,
        seat_quantity=SeatQuantity(row.seat_quantity),
        is_free_trial=row.is_free_trial,
        is_test=row.is_test,
        status=SubscriptionStatus(row.status),
        purchaser=MarketplaceUser(
            aad_tenant_id=row.purchaser_aad_tenant_id,
            aad_object_id=row.purchaser_aad_object_id,
            user_id=row.purchaser_user_id,
            user_email=row.purchaser_email,
        ),
        beneficiary=MarketplaceUser(
            aad_tenant_id=row.beneficiary_aad_tenant_id,
            aad_object_id=row.beneficiary_aad_object_id,
            user_id=row.beneficiary_user_id,
            user_email=row.beneficiary_email,
        ),
        term=MarketplaceTerm(
            start_date=row.term_start_date,
            end_date=row.term_end_date,
            term_unit=row.term_unit,
        ),
    )


def _to_columns(subscription: Subscription) -> dict:
    return {
        "subscription_name": subscription.subscription_name,
        "offer_id": subscription.offer_id,
        "plan_id": subscription.plan_id,
        "seat_quantity": subscription.seat_quantity.value,
        "is_free_trial": subscription.is_free_trial,
        "is_test": subscription.is_test,
        "status": subscription.status.value,
        "purchaser_aad_tenant_id": subscription.purchaser.aad_tenant_id,
        "purchaser_aad_object_id": subscription.purchaser.aad_object_id,
        "purchaser_user_id": subscription.purchaser.user_id,
        "purchaser_email": subscription.purchaser.user_email,
        "beneficiary_aad_tenant_id": subscription.beneficiary.aad_tenant_id,
        "beneficiary_aad_object_id": subscription.beneficiary.aad_object_id,
        "beneficiary_user_id": subscription.beneficiary.user_id,
        "beneficiary_email": subscription.beneficiary.user_email,
        "term_start_date": subscription.term.start_date,
        "term_end_date": subscription.term.end_date,
        "term_unit": subscription.term.term_unit,
    }
