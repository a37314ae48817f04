# ==========================================
# apps/products/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class Category(models.Model):
    """Category label. Products hold an unordered set of these."""

    name = models.CharField(max_length=50, unique=True, db_index=True)

    class Meta:
        db_table = 'categories'
        ordering = ['name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name


class Product(models.Model):
    """Catalog product with derived rating statistics."""

    name = models.CharField(max_length=200, db_index=True)
    description = models.TextField()
    categories = models.ManyToManyField(Category, blank=True, related_name='products')
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))])
    image_url = models.URLField(blank=True, max_length=500)
    # Derived from the review set, written only by rating_aggregation
    average_rating = models.DecimalField(max_digits=3, decimal_places=1, default=Decimal('0.0'))
    review_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['average_rating'], name='products_avg_rating_idx'),
            models.Index(fields=['review_count'], name='products_review_count_idx'),
            models.Index(fields=['price'], name='products_price_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def category_names(self) -> list[str]:
        return sorted(category.name for category in self.categories.all())

    def set_categories(self, names):
        """Replace the category set, creating missing labels."""
        cleaned = {name.strip() for name in names if name and name.strip()}
        categories = [Category.objects.get_or_create(name=name)[0] for name in cleaned]
        self.categories.set(categories)
