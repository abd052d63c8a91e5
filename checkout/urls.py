from django.urls import path

from . import views

app_name = "checkout"
urlpatterns = [
    path("create-order", views.create_order_view, name="create_order"),
    path("save-order", views.save_order_view, name="save_order"),
]
