# freshora/data/seed.py
"""Seeds the laundry catalog. Run with `python -m freshora.data.seed`."""
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from freshora.data.database import Database
from freshora.data.models.service import ServiceModel
from freshora.data.models.service_item import ServiceItemModel
from freshora.utils.logging import get_logger, setup_logging
from freshora.utils.settings import DATABASE_URL

logger = get_logger(__name__)

CATALOG = [
    {
        "slug": "laundry-services",
        "title": "Regular Laundry Services",
        "description": "Professional washing and cleaning for everyday clothing",
        "full_description": (
            "Thorough cleaning for all your everyday clothing items with premium "
            "detergents and fabric softeners."
        ),
        "rating": 5,
        "reviews": 150,
        "duration": "24-48 hours",
        "items": {
            "men": [
                ("T-Shirts", 3, "Cotton t-shirts, polo shirts"),
                ("Shirts (Formal)", 5, "Dress shirts, business shirts"),
                ("Pants/Trousers", 6, "Casual pants, formal trousers"),
                ("Jeans", 7, "Denim jeans, casual wear"),
                ("Suits", 15, "Two-piece suits, blazers"),
            ],
            "women": [
                ("T-Shirts/Tops", 3, "Casual tops, blouses"),
                ("Dresses", 8, "Casual and formal dresses"),
                ("Skirts", 5, "Mini, midi, maxi skirts"),
                ("Blouses", 6, "Formal and casual blouses"),
            ],
            "children": [
                ("T-Shirts", 2, "Kids casual t-shirts"),
                ("School Uniforms", 5, "School shirts, pants"),
                ("Pajamas", 3, "Sleepwear, nightwear"),
            ],
        },
    },
    {
        "slug": "dry-cleaning-services",
        "title": "Dry Cleaning Services",
        "description": "Specialized dry cleaning for delicate and formal wear",
        "full_description": (
            "Professional dry cleaning for delicate and valuable garments that "
            "preserves fabric quality."
        ),
        "rating": 5,
        "reviews": 89,
        "duration": "2-3 days",
        "items": {
            "men": [
                ("Suits", 20, "Two-piece business suits"),
                ("Blazers", 15, "Sport coats, blazers"),
                ("Ties", 5, "Neckties, bow ties"),
            ],
            "women": [
                ("Dresses", 18, "Formal and cocktail dresses"),
                ("Coats", 30, "Winter coats, fur coats"),
                ("Evening Gowns", 35, "Formal evening wear"),
            ],
        },
    },
    {
        "slug": "express-laundry-services",
        "title": "Express Laundry Services",
        "description": "Fast turnaround laundry services for urgent needs",
        "rating": 4,
        "reviews": 67,
        "duration": "6-24 hours",
        "unit": "Per KG",
        "items": {
            "wash-and-fold": [
                ("Express Wash & Fold - 8hrs", 60, "Completed within 8 hours"),
                ("Express Wash & Fold - 24hrs", 30, "Completed within 24 hours"),
                ("Normal Wash & Fold", 15, "Standard wash and fold service"),
            ],
            "wash-and-iron": [
                ("Express Wash & Iron - 6hrs", 80, "Completed within 6 hours"),
                ("Normal Wash & Iron", 20, "Standard wash and iron service"),
            ],
        },
    },
    {
        "slug": "luxury-shoe-cleaning",
        "title": "Luxury Shoe Cleaning",
        "description": "Premium shoe cleaning and restoration services",
        "rating": 5,
        "reviews": 45,
        "duration": "3-5 days",
        "items": {
            "men": [
                ("Men's Leather Shoe Deep Clean", 350, "Cleaning and conditioning for leather shoes"),
                ("Men's Sneakers Restoration", 300, "Deep cleaning and whitening"),
            ],
            "women": [
                ("Women's High Heel Cleaning", 380, "Cleaning for delicate and designer heels"),
                ("Women's Suede Boot Care", 420, "Stain removal and texture preservation"),
            ],
        },
    },
]


def seed_catalog(db: Session, catalog=CATALOG) -> int:
    """Inserts services whose slug is not present yet. Returns how many were added."""
    added = 0
    for entry in catalog:
        exists = db.execute(
            select(ServiceModel.id).where(ServiceModel.slug == entry["slug"])
        ).scalar_one_or_none()
        if exists:
            continue

        service = ServiceModel(
            slug=entry["slug"],
            title=entry["title"],
            description=entry["description"],
            full_description=entry.get("full_description") or entry["description"],
            rating=entry.get("rating", 5),
            reviews=entry.get("reviews", 0),
            duration=entry.get("duration", "24-48 hours"),
        )
        unit = entry.get("unit", "Per Item")
        for category, rows in entry["items"].items():
            for name, price, description in rows:
                service.items.append(
                    ServiceItemModel(
                        category=category,
                        name=name,
                        price=Decimal(price),
                        unit=unit,
                        description=description,
                    )
                )
        db.add(service)
        added += 1

    db.commit()
    return added


def main():
    setup_logging()
    database = Database(DATABASE_URL)
    database.create_all()
    try:
        with database.session_scope() as session:
            added = seed_catalog(session)
        logger.info(f"Seeded {added} service(s)")
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
