from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    # GET|POST|DELETE /api/user/notifications/            - Inbox
    # GET    /api/user/notifications/unread-count/        - Unread badge
    # PUT    /api/user/notifications/read-all/            - Mark all read
    # PUT    /api/user/notifications/{id}/read/           - Mark one read
    # DELETE /api/user/notifications/{id}/                - Delete one
    path('', views.notifications, name='notifications'),
    path('unread-count/', views.unread_count, name='unread-count'),
    path('read-all/', views.mark_all_read, name='read-all'),
    path('<int:notification_id>/read/', views.mark_read, name='mark-read'),
    path('<int:notification_id>/', views.remove_notification, name='remove-notification'),
]
