from django.db import models


class Order(models.Model):
    """A confirmed, paid order. One row per document id in the ``orders`` collection."""

    PAID = "Paid"

    document_id = models.CharField(max_length=128, primary_key=True)
    user_id = models.CharField(max_length=128, blank=True, default="", db_index=True)

    customer_name = models.CharField(max_length=200, blank=True, default="")
    phone = models.CharField(max_length=32, blank=True, default="")
    address = models.TextField(blank=True, default="")

    # all amounts in paise
    total_amount = models.PositiveBigIntegerField(default=0)
    subtotal = models.PositiveBigIntegerField(default=0)
    shipping = models.PositiveBigIntegerField(default=0)

    payment_id = models.CharField(max_length=64, blank=True, default="", db_index=True)
    gateway_order_id = models.CharField(max_length=64, blank=True, default="", db_index=True)
    payment_status = models.CharField(max_length=16, default=PAID)
    signature = models.CharField(max_length=128, blank=True, null=True)

    items = models.JSONField(default=list, blank=True)

    date_placed = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-date_placed",)

    def __str__(self):
        return f"{self.document_id} ({self.payment_status})"

    def to_document(self) -> dict:
        return {
            "userid": self.user_id,
            "customerName": self.customer_name,
            "phone": self.phone,
            "address": self.address,
            "totalAmount": self.total_amount,
            "subtotal": self.subtotal,
            "shipping": self.shipping,
            "paymentId": self.payment_id,
            "orderId": self.gateway_order_id,
            "paymentStatus": self.payment_status,
            "datePlaced": self.date_placed,
            "items": list(self.items or []),
            "razorpaySignature": self.signature,
        }
