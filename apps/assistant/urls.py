from django.urls import path
from . import views

app_name = 'assistant'

urlpatterns = [
    # POST /api/products/{id}/chat/        - Ask about a product
    path('products/<int:product_id>/chat/', views.product_chat, name='product-chat'),
]
