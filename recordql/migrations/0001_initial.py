import django.core.serializers.json
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="RecordType",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
                ("description", models.TextField(blank=True)),
                ("position", models.PositiveIntegerField(default=0)),
            ],
            options={
                "ordering": ["position", "name"],
            },
        ),
        migrations.CreateModel(
            name="StoredRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type_name", models.CharField(db_index=True, max_length=100)),
                ("record_id", models.CharField(max_length=64)),
                ("data", models.JSONField(default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["created_at", "id"],
                "unique_together": {("type_name", "record_id")},
            },
        ),
        migrations.CreateModel(
            name="RecordField",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("type", models.CharField(help_text="Primitive kind, 'connection', or the name of another record type", max_length=100)),
                ("is_required", models.BooleanField(default=False)),
                ("is_deprecated", models.BooleanField(default=False)),
                ("target", models.CharField(blank=True, help_text="Target record type of a connection field", max_length=100)),
                ("reverse_name", models.CharField(blank=True, help_text="Field on the target type that points back to the parent record", max_length=100)),
                ("description", models.TextField(blank=True)),
                ("position", models.PositiveIntegerField(default=0)),
                ("record_type", models.ForeignKey(on_delete=models.CASCADE, related_name="fields", to="recordql.recordtype")),
            ],
            options={
                "ordering": ["position", "id"],
                "unique_together": {("record_type", "name")},
            },
        ),
    ]
