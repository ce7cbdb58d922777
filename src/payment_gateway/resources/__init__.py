"""Payment Gateway SDK Resources."""
from .accounts import AccountsResource
from .banks import BanksResource
from .base import BaseResource, ErrorRule
from .cards import CardsResource
from .clients import ClientsResource
from .customers import CustomersResource
from .payments import PaymentsResource
from .tenants import TenantsResource

__all__ = [
    "BaseResource",
    "ErrorRule",
    "AccountsResource",
    "BanksResource",
    "CardsResource",
    "ClientsResource",
    "CustomersResource",
    "PaymentsResource",
    "TenantsResource",
]
