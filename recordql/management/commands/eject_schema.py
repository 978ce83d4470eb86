import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from graphql import get_introspection_query, print_schema

from recordql.core.exceptions import SchemaConfigurationError
from recordql.core.settings import SchemaSettings
from recordql.schema import SchemaBuilder


class Command(BaseCommand):
    help = "Build the record schema from metadata and print it as SDL or introspection JSON."

    def add_arguments(self, parser):
        parser.add_argument(
            "--source",
            dest="metadata_source",
            help="Metadata to build from: 'database' or a JSON/YAML file (default: settings).",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Write the result to this file instead of stdout.",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Emit the introspection result as JSON.",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="JSON indentation (default: 2).",
        )

    def handle(self, *args, **options):
        overrides = {}
        if options.get("metadata_source"):
            overrides["metadata_source"] = options["metadata_source"]
        builder = SchemaBuilder(settings=SchemaSettings.from_settings(**overrides))

        try:
            schema = builder.get_schema()
        except SchemaConfigurationError as e:
            raise CommandError(f"Cannot build schema from metadata: {e}") from e

        output = (
            self._introspection_json(schema, options["indent"])
            if options["json"]
            else print_schema(schema.graphql_schema)
        )

        if not options.get("output_file"):
            self.stdout.write(output)
            return

        Path(options["output_file"]).write_text(output, encoding="utf-8")
        self.stdout.write(self.style.SUCCESS(f"Schema written to {options['output_file']}"))

    def _introspection_json(self, schema, indent: int) -> str:
        result = schema.execute(get_introspection_query())
        if result.errors:
            raise CommandError(f"Introspection failed: {result.errors}")
        return json.dumps(result.data, indent=indent)
