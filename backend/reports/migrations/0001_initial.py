from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ZReport",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("business_date", models.DateField(unique=True)),
                ("total_transactions", models.PositiveIntegerField(default=0)),
                ("total_sales", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("employee_breakdown", models.JSONField(default=list, help_text="Per-employee transactions and sales, highest sales first.")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Z Report",
                "verbose_name_plural": "Z Reports",
                "ordering": ["-business_date"],
            },
        ),
    ]
