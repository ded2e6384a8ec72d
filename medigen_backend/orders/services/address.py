# orders/services/address.py

"""
DELIVERY ADDRESS + CUSTOMER EMAIL VALIDATION

Shared by the checkout serializer and place_order() so an order can never
be persisted with an address the API would have rejected.
"""

from __future__ import annotations

import re

from django.core.exceptions import ValidationError
from django.core.validators import validate_email

from orders.services.exceptions import InvalidOrderDataError

ADDRESS_TYPES = ("home", "work")

# 10-digit Indian mobile, optional +91 prefix
PHONE_RE = re.compile(r"^(?:\+91[\s-]?)?[6-9]\d{9}$")
PINCODE_RE = re.compile(r"^[1-9]\d{5}$")

REQUIRED_FIELDS = ("full_name", "phone", "line", "city", "pincode")


def address_errors(address) -> dict:
    if not isinstance(address, dict):
        return {"address": "Address must be an object"}

    errors = {}
    for name in REQUIRED_FIELDS:
        if not str(address.get(name) or "").strip():
            errors[name] = "This field is required."

    phone = str(address.get("phone") or "").strip()
    if phone and not PHONE_RE.match(phone):
        errors["phone"] = "Enter a valid 10-digit mobile number."

    pincode = str(address.get("pincode") or "").strip()
    if pincode and not PINCODE_RE.match(pincode):
        errors["pincode"] = "Enter a valid 6-digit pincode."

    if (address.get("type") or "home") not in ADDRESS_TYPES:
        errors["type"] = f"Must be one of: {', '.join(ADDRESS_TYPES)}."

    return errors


def clean_address(address) -> dict:
    errors = address_errors(address)
    if errors:
        raise InvalidOrderDataError("Invalid delivery address", errors)

    return {
        "full_name": str(address["full_name"]).strip(),
        "phone": str(address["phone"]).strip(),
        "line": str(address["line"]).strip(),
        "city": str(address["city"]).strip(),
        "pincode": str(address["pincode"]).strip(),
        "type": address.get("type") or "home",
    }


def clean_email(email) -> str:
    email = (email or "").strip().lower()
    try:
        validate_email(email)
    except ValidationError as exc:
        raise InvalidOrderDataError(
            "Invalid customer email", {"customer_email": "Enter a valid email address."}
        ) from exc
    return email
