from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_active", models.BooleanField(db_index=True, default=True, help_text="Designates whether this record is active. Inactive records are considered archived/soft-deleted.")),
                ("archived_at", models.DateTimeField(blank=True, help_text="Timestamp when this record was archived.", null=True)),
                ("name", models.CharField(help_text="Name shown to customers.", max_length=200)),
                ("item_type", models.CharField(choices=[("Combos", "Combos"), ("Side", "Side"), ("Entree", "Entree"), ("Appetizer", "Appetizer"), ("Drink", "Drink")], db_index=True, help_text="Menu category the item is listed under.", max_length=20)),
                ("combo_type", models.CharField(blank=True, choices=[("BOWL", "Bowl"), ("PLATE", "Plate"), ("BIGGER_PLATE", "Bigger Plate")], default="", help_text="Set on combo anchors (Bowl, Plate, Bigger Plate) only.", max_length=20)),
                ("price", models.DecimalField(decimal_places=2, help_text="The selling price of the item.", max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0.00"))])),
                ("description", models.TextField(blank=True)),
                ("image", models.CharField(blank=True, help_text="Image path or URL for the kiosk card.", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
