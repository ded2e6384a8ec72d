# orders/tests/helpers.py

from decimal import Decimal

from orders.models import Order
from orders.services import place_order

ADDRESS = {
    "full_name": "Asha Verma",
    "phone": "+919876543210",
    "line": "12 MG Road",
    "city": "Bengaluru",
    "pincode": "560001",
    "type": "home",
}

LINE = {
    "id": "med_para",
    "name": "Paracetamol 500mg",
    "quantity": 50,
    "final_total": "142.50",
}


def make_order(**overrides) -> Order:
    data = {
        "items": [dict(LINE)],
        "total_amount": Decimal("192.50"),
        "address": dict(ADDRESS),
        "customer_email": "asha@example.com",
    }
    data.update(overrides)
    return place_order(**data)
