from django.core.serializers.json import DjangoJSONEncoder
from django.db import models


class RecordType(models.Model):
    """
    Stores the description of one custom record type.
    """

    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "recordql"
        ordering = ["position", "name"]

    def __str__(self):
        return self.name


class RecordField(models.Model):
    """
    Stores one field of a record type.
    """

    record_type = models.ForeignKey(
        RecordType, on_delete=models.CASCADE, related_name="fields"
    )
    name = models.CharField(max_length=100)
    type = models.CharField(
        max_length=100,
        help_text="Primitive kind, 'connection', or the name of another record type",
    )
    is_required = models.BooleanField(default=False)
    is_deprecated = models.BooleanField(default=False)
    target = models.CharField(
        max_length=100,
        blank=True,
        help_text="Target record type of a connection field",
    )
    reverse_name = models.CharField(
        max_length=100,
        blank=True,
        help_text="Field on the target type that points back to the parent record",
    )
    description = models.TextField(blank=True)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        app_label = "recordql"
        unique_together = [("record_type", "name")]
        ordering = ["position", "id"]

    def __str__(self):
        return f"{self.record_type.name}.{self.name}"

    def to_metadata_payload(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "isRequired": self.is_required,
            "isDeprecated": self.is_deprecated,
            "target": self.target or None,
            "reverseName": self.reverse_name or None,
            "description": self.description or None,
        }


class StoredRecord(models.Model):
    """
    Generic storage for records of every custom type.
    """

    type_name = models.CharField(max_length=100, db_index=True)
    record_id = models.CharField(max_length=64)
    data = models.JSONField(default=dict, encoder=DjangoJSONEncoder)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "recordql"
        unique_together = [("type_name", "record_id")]
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.type_name} ({self.record_id})"

    def as_record(self) -> dict:
        return {**self.data, "id": self.record_id}
