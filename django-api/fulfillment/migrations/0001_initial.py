from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Subscription",
            fields=[
                (
                    "subscription_id",
                    models.CharField(max_length=128, primary_key=True, serialize=False),
                ),
                ("subscription_name", models.CharField(max_length=255)),
                ("offer_id", models.CharField(max_length=255)),
                ("plan_id", models.CharField(max_length=255)),
                ("seat_quantity", models.PositiveIntegerField(default=0)),
                ("is_free_trial", models.BooleanField(default=False)),
                ("is_test", models.BooleanField(default=False)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("PendingActivation", "Pending Activation"),
                            ("Active", "Active"),
                            ("Suspended", "Suspended"),
                            ("Cancelled", "Cancelled"),
                        ],
                        max_length=32,
                    ),
                ),
                ("purchaser_aad_tenant_id", models.CharField(blank=True, max_length=64)),
                ("purchaser_aad_object_id", models.CharField(blank=True, max_length=64)),
                ("purchaser_user_id", models.CharField(blank=True, max_length=64)),
                ("purchaser_email", models.EmailField(blank=True, max_length=254)),
                ("beneficiary_aad_tenant_id", models.CharField(blank=True, max_length=64)),
                ("beneficiary_aad_object_id", models.CharField(blank=True, max_length=64)),
                ("beneficiary_user_id", models.CharField(blank=True, max_length=64)),
                ("beneficiary_email", models.EmailField(blank=True, max_length=254)),
                ("term_start_date", models.DateTimeField(blank=True, null=True)),
                ("term_end_date", models.DateTimeField(blank=True, null=True)),
                ("term_unit", models.CharField(blank=True, max_length=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="fulfillment_sub_created_idx"),
                ],
            },
        ),
    ]
