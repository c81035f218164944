"""
Async script to seed the reference data products point at: sellers, brands,
categories and tags.

Rows whose slug (or, for sellers, name) already exists are skipped, so the
script can be run repeatedly.

Usage:
    uv run python scripts/seed_reference_data.py
    DATABASE_DSN=sqlite+aiosqlite:///./catalog.db uv run python scripts/seed_reference_data.py
"""
import asyncio

from catalog_api.core import AsyncDBPool
from catalog_api.main_config import database_config
from catalog_api.models import Base, Brand, Category, Seller, Tag
from catalog_api.repository import BrandRepository, CategoryRepository, SellerRepository, TagRepository

SELLERS = [
    {"name": "Hanbit Store", "rating": 4.7, "contact_email": "hello@hanbit.example"},
    {"name": "Daily Goods", "rating": 4.2, "contact_email": "cs@dailygoods.example"},
]

BRANDS = [
    {"name": "Nordlys", "slug": "nordlys", "website": "https://nordlys.example"},
    {"name": "Sora Living", "slug": "sora-living"},
]

# (name, slug, parent slug)
CATEGORIES = [
    ("Clothing", "clothing", None),
    ("Outerwear", "outerwear", "clothing"),
    ("Home", "home", None),
    ("Kitchen", "kitchen", "home"),
]

TAGS = [
    ("New arrival", "new-arrival"),
    ("Best seller", "best-seller"),
    ("Eco friendly", "eco-friendly"),
]


async def seed_sellers() -> int:
    seeded = 0
    async with AsyncDBPool.get_session() as session:
        repo = SellerRepository(session)
        for seller_data in SELLERS:
            if await repo.get_by(name=seller_data["name"]):
                print(f"  Skipping seller {seller_data['name']} (already exists)")
                continue
            await repo.save(Seller(**seller_data))
            seeded += 1
        await session.commit()
    print(f"✓ Seeded {seeded} sellers")
    return seeded


async def seed_brands() -> int:
    seeded = 0
    async with AsyncDBPool.get_session() as session:
        repo = BrandRepository(session)
        for brand_data in BRANDS:
            if await repo.get_by(slug=brand_data["slug"]):
                print(f"  Skipping brand {brand_data['slug']} (already exists)")
                continue
            await repo.save(Brand(**brand_data))
            seeded += 1
        await session.commit()
    print(f"✓ Seeded {seeded} brands")
    return seeded


async def seed_categories() -> int:
    """Seed categories; parents are listed before their children."""
    seeded = 0
    async with AsyncDBPool.get_session() as session:
        repo = CategoryRepository(session)
        for name, slug, parent_slug in CATEGORIES:
            if await repo.get_by(slug=slug):
                print(f"  Skipping category {slug} (already exists)")
                continue
            parent = await repo.get_by(slug=parent_slug) if parent_slug else None
            await repo.save(
                Category(
                    name=name,
                    slug=slug,
                    parent=parent,
                    level=parent.level + 1 if parent else 1,
                )
            )
            seeded += 1
        await session.commit()
    print(f"✓ Seeded {seeded} categories")
    return seeded


async def seed_tags() -> int:
    seeded = 0
    async with AsyncDBPool.get_session() as session:
        repo = TagRepository(session)
        for name, slug in TAGS:
            if await repo.get_by(slug=slug):
                print(f"  Skipping tag {slug} (already exists)")
                continue
            await repo.save(Tag(name=name, slug=slug))
            seeded += 1
        await session.commit()
    print(f"✓ Seeded {seeded} tags")
    return seeded


async def main():
    """Main seeding function."""
    print("=" * 60)
    print("Catalog API - Reference Data Seed")
    print("=" * 60)

    print(f"\nInitializing database ({database_config.url})...")
    await AsyncDBPool.init(database_config)

    try:
        async with AsyncDBPool.engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        print("\nSeeding data...\n")
        await seed_sellers()
        await seed_brands()
        await seed_categories()
        await seed_tags()

        print("\n" + "=" * 60)
        print("Seeding completed successfully!")
        print("=" * 60)

        async with AsyncDBPool.get_session() as session:
            print("\nDatabase summary:")
            print(f"  Sellers:    {await SellerRepository(session).count()}")
            print(f"  Brands:     {await BrandRepository(session).count()}")
            print(f"  Categories: {await CategoryRepository(session).count()}")
            print(f"  Tags:       {await TagRepository(session).count()}")

    except Exception as e:
        print(f"\n✗ Error during seeding: {e}")
        raise

    finally:
        await AsyncDBPool.dispose()


if __name__ == "__main__":
    asyncio.run(main())
