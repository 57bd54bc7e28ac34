from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("fulfillment", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="subscription",
            name="purchaser_aad_tenant_id",
            field=models.CharField(blank=True, max_length=255),
        ),
        migrations.AlterField(
            model_name="subscription",
            name="purchaser_aad_object_id",
            field=models.CharField(blank=True, max_length=255),
        ),
        migrations.AlterField(
            model_name="subscription",
            name="purchaser_user_id",
            field=models.CharField(blank=True, max_length=255),
        ),
        migrations.AlterField(
            model_name="subscription",
            name="beneficiary_aad_tenant_id",
            field=models.CharField(blank=True, max_length=255),
        ),
        migrations.AlterField(
            model_name="subscription",
            name="beneficiary_aad_object_id",
            field=models.CharField(blank=True, max_length=255),
        ),
        migrations.AlterField(
            model_name="subscription",
            name="beneficiary_user_id",
            field=models.CharField(blank=True, max_length=255),
        ),
        migrations.AlterField(
            model_name="subscription",
            name="term_unit",
            field=models.CharField(blank=True, max_length=255),
        ),
    ]
