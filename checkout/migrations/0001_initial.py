from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("document_id", models.CharField(max_length=128, primary_key=True, serialize=False)),
                ("user_id", models.CharField(blank=True, db_index=True, default="", max_length=128)),
                ("customer_name", models.CharField(blank=True, default="", max_length=200)),
                ("phone", models.CharField(blank=True, default="", max_length=32)),
                ("address", models.TextField(blank=True, default="")),
                ("total_amount", models.PositiveBigIntegerField(default=0)),
                ("subtotal", models.PositiveBigIntegerField(default=0)),
                ("shipping", models.PositiveBigIntegerField(default=0)),
                ("payment_id", models.CharField(blank=True, db_index=True, default="", max_length=64)),
                ("gateway_order_id", models.CharField(blank=True, db_index=True, default="", max_length=64)),
                ("payment_status", models.CharField(default="Paid", max_length=16)),
                ("signature", models.CharField(blank=True, max_length=128, null=True)),
                ("items", models.JSONField(blank=True, default=list)),
                ("date_placed", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ("-date_placed",),
            },
        ),
    ]
