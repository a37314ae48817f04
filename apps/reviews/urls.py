from django.urls import path
from . import views

app_name = 'reviews'

urlpatterns = [
    # GET  /api/products/{id}/reviews/     - Paged reviews of a product
    # POST /api/products/{id}/reviews/     - Submit review
    # PUT  /api/reviews/{id}/helpful/      - Toggle helpful vote
    # GET  /api/reviews/voted/             - Caller's voted review ids
    path('products/<int:product_id>/reviews/', views.product_reviews, name='product-reviews'),
    path('reviews/voted/', views.voted_reviews, name='voted-reviews'),
    path('reviews/<int:review_id>/helpful/', views.mark_review_helpful, name='mark-helpful'),
]
