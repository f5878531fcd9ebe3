import django.utils.timezone
import users.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("is_active", models.BooleanField(db_index=True, default=True, help_text="Designates whether this record is active. Inactive records are considered archived/soft-deleted.")),
                ("archived_at", models.DateTimeField(blank=True, help_text="Timestamp when this record was archived.", null=True)),
                ("username", models.CharField(help_text="Login name used on the cashier and manager terminals.", max_length=150, unique=True, verbose_name="username")),
                ("name", models.CharField(max_length=150, verbose_name="name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                ("role", models.CharField(choices=[("MANAGER", "Manager"), ("CASHIER", "Cashier"), ("KITCHEN", "Kitchen")], default="CASHIER", max_length=50, verbose_name="role")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["id"],
                "indexes": [models.Index(fields=["is_active", "role"], name="users_active_role_idx")],
            },
            managers=[
                ("objects", users.models.UserManager()),
            ],
        ),
    ]
