from django.urls import path
from . import views

app_name = 'products'

urlpatterns = [
    # GET /api/products/                   - Filtered, paged product list
    # GET /api/products/stats/             - Hero statistics
    # GET /api/products/{id}/              - Product detail
    path('', views.product_list, name='product-list'),
    path('stats/', views.product_stats, name='product-stats'),
    path('<int:product_id>/', views.product_detail, name='product-detail'),
]
