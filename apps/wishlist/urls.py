from django.urls import path
from . import views

app_name = 'wishlist'

urlpatterns = [
    # GET  /api/user/wishlist/             - Caller's wishlisted product ids
    # POST /api/user/wishlist/{productId}/ - Toggle product
    path('', views.wishlist, name='wishlist'),
    path('<int:product_id>/', views.toggle_wishlist_item, name='toggle-wishlist'),
]
