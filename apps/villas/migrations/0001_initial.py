import django.db.models.functions.text
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Villa",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=30)),
                ("details", models.TextField(blank=True, default="")),
                ("rate", models.FloatField()),
                ("occupancy", models.PositiveIntegerField(default=0)),
                (
                    "sqft",
                    models.PositiveIntegerField(
                        default=0,
                        help_text="Floor area in square feet.",
                    ),
                ),
                ("image_url", models.CharField(blank=True, default="", max_length=500)),
                ("amenity", models.CharField(blank=True, default="", max_length=255)),
                ("created_date", models.DateTimeField(auto_now_add=True)),
                ("updated_date", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Villa",
                "verbose_name_plural": "Villas",
                "ordering": ["id"],
            },
        ),
        migrations.AddConstraint(
            model_name="villa",
            constraint=models.UniqueConstraint(
                django.db.models.functions.text.Lower("name"),
                name="villa_name_ci_unique",
            ),
        ),
    ]
