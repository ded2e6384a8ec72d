"""
PATH: catalog/models/__init__.py

Catalog models export surface.
"""

from .medicine import Medicine, MedicineCategory, new_medicine_id

__all__ = [
    "Medicine",
    "MedicineCategory",
    "new_medicine_id",
]
