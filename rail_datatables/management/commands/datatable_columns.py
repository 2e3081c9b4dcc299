import logging

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from rail_datatables.api import columns_to_json, get_datatable_columns

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Print the DataTables.js column definitions of a model as JSON."

    def add_arguments(self, parser):
        parser.add_argument(
            "model",
            help="Model label in the form app_label.ModelName.",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=None,
            help="Indentation level for JSON output (default: RAIL_DATATABLES['json_indent']).",
        )
        parser.add_argument(
            "--camelcase",
            action="store_true",
            default=None,
            help="Convert snake_case field names to lowerCamelCase.",
        )
        parser.add_argument(
            "--include-properties",
            action="store_true",
            default=None,
            help="Include public model properties as columns.",
        )

    def handle(self, *args, **options):
        label = options["model"]
        try:
            model = apps.get_model(label)
        except (LookupError, ValueError) as exc:
            raise CommandError(f"Unknown model '{label}': {exc}") from exc

        columns = get_datatable_columns(
            model,
            auto_camelcase=options["camelcase"],
            include_properties=options["include_properties"],
        )
        output = columns_to_json(columns, indent=options["indent"])
        logger.info("Generated %d columns for %s", len(columns), label)

        if options["output_file"]:
            with open(options["output_file"], "w", encoding="utf-8") as f:
                f.write(output)
            self.stdout.write(
                self.style.SUCCESS(f"Columns written to {options['output_file']}")
            )
        else:
            self.stdout.write(output)
