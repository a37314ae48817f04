"""
Management command to seed the product catalog with demo data.

Usage:
    python manage.py seed_catalog [--clear] [--seed N]

This creates:
- 24 products across Electronics, Smartphones, Laptops, Tablets,
  Wearables, Gaming, Audio and Accessories
- 1-10 random reviews per product
- 30 extra reviews on the first product, enough to page through

Nothing is created when products already exist, unless --clear is given.
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal
import random

from apps.notifications.models import Notification
from apps.products.models import Category, Product
from apps.reviews.models import Review
from apps.reviews.services import add_review
from apps.wishlist.models import WishlistItem


IMAGE_URL = 'https://images.unsplash.com/photo-{}?auto=format&fit=crop&q=80&w=800'

PRODUCTS = [
    # name, description, categories, price, image id
    ("iPhone 15 Pro", "The latest iPhone with A17 Pro chip and Titanium design.",
     ["Electronics", "Smartphones"], '999.99', '1695048133142-1a20484d2569'),
    ("Samsung Galaxy S24 Ultra", "AI-powered smartphone with S-Pen.",
     ["Electronics", "Smartphones"], '1199.99', '1610945415295-d9bbf067e59c'),
    ("Google Pixel 8 Pro", "The best of Google AI and camera.",
     ["Electronics", "Smartphones"], '899.99', '1696446701796-da61225697cc'),
    ("MacBook Air M2", "Strikingly thin design and incredible speed.",
     ["Laptops", "Electronics"], '1099.00', '1611186871348-b1ce696e52c9'),
    ("Dell XPS 13", "Compact and powerful ultrabook.",
     ["Laptops", "Electronics"], '1299.00', '1593642702821-c8da6771f0c6'),
    ("Asus ROG Zephyrus", "Gaming power in a slim chassis.",
     ["Laptops", "Gaming"], '1799.00', '1603302576837-37561b2e2302'),
    ("iPad Pro 12.9", "The ultimate iPad experience with M2 chip.",
     ["Tablets", "Electronics"], '1099.00', '1544244015-0df4b3ffc6b0'),
    ("Samsung Galaxy Tab S9", "Dynamic AMOLED 2X display for stunning visuals.",
     ["Tablets", "Electronics"], '799.99', '1585790050230-5dd28404ccb9'),
    ("Microsoft Surface Pro 9", "Laptop power, tablet flexibility.",
     ["Tablets", "Laptops"], '999.99', '1542744094-3a31f272c490'),
    ("iPad Air 5", "Light. Bright. Full of might.",
     ["Tablets", "Electronics"], '599.00', '1589739900243-4b52cd9b104e'),
    ("Apple Watch Series 9", "Smarter, brighter, and more powerful.",
     ["Wearables", "Electronics"], '399.00', '1546868871-7041f2a55e12'),
    ("Samsung Galaxy Watch 6", "Advanced sleep coaching and heart monitoring.",
     ["Wearables", "Electronics"], '299.00', '1579586337278-3befd40fd17a'),
    ("Razer DeathAdder V3", "Ultra-lightweight ergonomic esports mouse.",
     ["Gaming", "Accessories"], '149.99', '1527814050087-3793815479db'),
    ("Keychron Q1 Pro", "Custom mechanical keyboard with QMK/VIA support.",
     ["Gaming", "Accessories"], '199.00', '1595225476474-87563907a212'),
    ("Alienware 34 Monitor", "Curved QD-OLED gaming monitor.",
     ["Gaming", "Electronics"], '899.00', '1527443224154-c4a3942d3acf'),
    ("PS5 DualSense Controller", "Immersive haptic feedback and dynamic triggers.",
     ["Gaming", "Accessories"], '69.99', '1606318801954-d46d46d3360a'),
    ("Sony WH-1000XM5", "Industry-leading noise canceling headphones.",
     ["Audio", "Electronics"], '349.99', '1618366712010-f4ae9c647dcb'),
    ("AirPods Pro 2", "Adaptive Audio and Active Noise Cancellation.",
     ["Audio", "Electronics", "Accessories"], '249.00', '1600294037681-c80b4cb5b434'),
    ("JBL Flip 6", "Bold sound for every adventure.",
     ["Audio", "Electronics"], '129.95', '1608043152269-423dbba4e7e1'),
    ("Sonos Era 100", "Next-gen acoustics and new levels of connectivity.",
     ["Audio", "Electronics"], '249.00', '1545454675-3531b543be5d'),
    ("Anker 737 Power Bank", "Ultra-powerful two-way charging.",
     ["Accessories", "Electronics"], '149.99', '1609091839311-d5365f9ff1c5'),
    ("Logitech MX Master 3S", "Performance wireless mouse.",
     ["Accessories", "Electronics"], '99.99', '1527864550417-7fd91fc51a46'),
    ("Bellroy Tech Kit", "Organize your cables and accessories.",
     ["Accessories"], '59.00', '1553062407-98eeb64c6a62'),
    ("Nomad Base One", "Premium MagSafe charger.",
     ["Accessories", "Electronics"], '99.95', '1616348436168-de43ad0db179'),
]

REVIEWER_NAMES = [
    "Michael", "Sarah", "David", "Emma", "James",
    "Olivia", "Robert", "Sophia", "William", "Isabella",
]

COMMENTS = [
    "Great product, highly recommended!",
    "Not bad, but a bit expensive.",
    "Fast delivery and good quality.",
    "I love the design.",
    "Performance is top notch.",
    "Battery drains a bit fast.",
    "Screen is beautiful.",
    "Worth every penny.",
    "Just okay.",
    "Exceeded my expectations.",
]

PAGINATION_REVIEWS = 30


class Command(BaseCommand):
    help = 'Seed the product catalog with demo products and reviews'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete existing catalog data before seeding',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Random seed for reproducible reviews',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()
        elif Product.objects.exists():
            self.stdout.write(self.style.WARNING('Catalog already has products, nothing to do. Use --clear to reseed.'))
            return

        rng = random.Random(options['seed'])

        self.stdout.write('Seeding catalog...')
        products = self.create_products()
        review_count = self.create_reviews(products, rng)

        self.stdout.write(self.style.SUCCESS(
            f'Created {len(products)} products and {review_count} reviews.'
        ))

    def clear_data(self):
        """Clear all catalog data from the database."""
        Notification.objects.all().delete()
        WishlistItem.objects.all().delete()
        Review.objects.all().delete()
        Product.objects.all().delete()
        Category.objects.all().delete()

    def create_products(self):
        self.stdout.write('  Creating products...')

        products = []
        for name, description, categories, price, image_id in PRODUCTS:
            product = Product.objects.create(
                name=name,
                description=description,
                price=Decimal(price),
                image_url=IMAGE_URL.format(image_id),
            )
            product.set_categories(categories)
            products.append(product)

        return products

    def create_reviews(self, products, rng):
        """Random reviews through add_review so product statistics stay consistent."""
        self.stdout.write('  Creating reviews...')

        created = 0
        for product in products:
            for _ in range(rng.randint(1, 10)):
                self.add_random_review(product, rng)
                created += 1

        # Enough reviews on one product to page through
        for i in range(PAGINATION_REVIEWS):
            self.add_random_review(products[0], rng, suffix=f' (Test Review {i + 1})')
            created += 1

        return created

    def add_random_review(self, product, rng, suffix=''):
        add_review(
            product_id=product.id,
            reviewer_name=rng.choice(REVIEWER_NAMES),
            comment=rng.choice(COMMENTS) + suffix,
            rating=rng.randint(1, 5),
        )
