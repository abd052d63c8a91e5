from django.contrib import admin

from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("document_id", "payment_status", "total_amount", "customer_name", "user_id", "date_placed")
    search_fields = ("document_id", "gateway_order_id", "payment_id", "user_id", "phone")
    list_filter = ("payment_status", "date_placed")
    readonly_fields = ("date_placed", "signature", "items")
