from datetime import date, timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand

from catalog.models import Medicine, MedicineCategory


MEDICINES = [
    # id, name, brand, salt, category, generic, branded, strip, uses
    (
        "med_paracetamol_500",
        "Paracetamol 500mg",
        "Crocin",
        "Paracetamol (500mg)",
        MedicineCategory.FEVER,
        "15.00",
        "35.00",
        10,
        ["Fever", "Headache", "Body ache"],
    ),
    (
        "med_cetirizine_10",
        "Cetirizine 10mg",
        "Zyrtec",
        "Cetirizine Hydrochloride (10mg)",
        MedicineCategory.ALLERGY,
        "12.00",
        "48.00",
        10,
        ["Sneezing", "Runny nose", "Itching"],
    ),
    (
        "med_pantoprazole_40",
        "Pantoprazole 40mg",
        "Pantocid",
        "Pantoprazole (40mg)",
        MedicineCategory.ACIDITY,
        "30.00",
        "155.00",
        10,
        ["Acidity", "GERD", "Stomach ulcer"],
    ),
    (
        "med_amoxicillin_500",
        "Amoxicillin 500mg",
        "Mox",
        "Amoxicillin (500mg)",
        MedicineCategory.ANTIBIOTIC,
        "45.00",
        "110.00",
        10,
        ["Bacterial infections"],
    ),
    (
        "med_metformin_500",
        "Metformin 500mg",
        "Glycomet",
        "Metformin Hydrochloride (500mg)",
        MedicineCategory.DIABETES,
        "18.00",
        "42.00",
        20,
        ["Type 2 diabetes"],
    ),
    (
        "med_atorvastatin_10",
        "Atorvastatin 10mg",
        "Lipitor",
        "Atorvastatin (10mg)",
        MedicineCategory.HEART,
        "25.00",
        "190.00",
        15,
        ["High cholesterol"],
    ),
    (
        "med_ibuprofen_400",
        "Ibuprofen 400mg",
        "Brufen",
        "Ibuprofen (400mg)",
        MedicineCategory.PAIN,
        "14.00",
        "38.00",
        15,
        ["Pain", "Inflammation"],
    ),
    (
        "med_levothyroxine_50",
        "Levothyroxine 50mcg",
        "Thyronorm",
        "Levothyroxine Sodium (50mcg)",
        MedicineCategory.THYROID,
        "60.00",
        "145.00",
        30,
        ["Hypothyroidism"],
    ),
]


class Command(BaseCommand):
    help = "Seed the storefront catalog with sample generic medicines"

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding medicines..."))

        created_count = 0
        for idx, row in enumerate(MEDICINES):
            med_id, name, brand, salt, category, generic, branded, strip, uses = row

            _, created = Medicine.objects.get_or_create(
                id=med_id,
                defaults={
                    "name": name,
                    "brand_example": brand,
                    "salt_composition": salt,
                    "batch_number": f"BATCH-{idx + 1:03d}",
                    "category": category,
                    "common_use": uses,
                    "description": f"Generic alternative to {brand}.",
                    "generic_price": Decimal(generic),
                    "branded_price": Decimal(branded),
                    "strip_size": strip,
                    "stock": 500,
                    "expiry_date": date.today() + timedelta(days=365 + idx * 30),
                    "market_rates": [
                        {"shop_name": "MediGen", "price": generic, "type": "Generic"},
                        {"shop_name": "Local Chemist", "price": branded, "type": "Branded"},
                    ],
                },
            )
            if created:
                created_count += 1

        self.stdout.write(
            self.style.SUCCESS(f"Medicines seeded ({created_count} new).")
        )
