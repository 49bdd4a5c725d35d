from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Exoplanet",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.CharField(blank=True, max_length=100, null=True)),
                ("updated_by", models.CharField(blank=True, max_length=100, null=True)),
                ("version", models.PositiveIntegerField(default=0, editable=False)),
                ("id", models.AutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, unique=True)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("distance", models.FloatField(blank=True, null=True)),
                ("temperature", models.FloatField(blank=True, null=True)),
                ("year_discovered", models.IntegerField(blank=True, null=True)),
                ("radius", models.FloatField(blank=True, null=True)),
                ("mass", models.FloatField(blank=True, null=True)),
                ("semi_major_axis", models.FloatField(blank=True, null=True)),
                ("eccentricity", models.FloatField(blank=True, null=True)),
                ("orbital_period_days", models.FloatField(blank=True, null=True)),
                ("orbital_period_years", models.FloatField(blank=True, null=True)),
            ],
            options={
                "db_table": "exoplanet",
                "ordering": ["-id"],
                "indexes": [
                    models.Index(fields=["temperature"], name="exoplanet_temperature_idx"),
                    models.Index(fields=["year_discovered"], name="exoplanet_year_idx"),
                ],
            },
        ),
    ]
