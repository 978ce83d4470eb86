import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

pytestmark = pytest.mark.integration


@pytest.fixture
def metadata_file(tmp_path, author_book_payload):
    path = tmp_path / "types.json"
    path.write_text(json.dumps(author_book_payload), encoding="utf-8")
    return path


class TestEjectSchema:
    def test_sdl_to_stdout(self, metadata_file):
        out = StringIO()
        call_command("eject_schema", metadata_source=str(metadata_file), stdout=out)

        sdl = out.getvalue()
        assert "type Author" in sdl
        assert "input _AuthorInputObject" in sdl
        assert "type _Query" in sdl
        assert "interface Connection" in sdl

    def test_json(self, metadata_file):
        out = StringIO()
        call_command(
            "eject_schema", metadata_source=str(metadata_file), json=True, stdout=out
        )

        introspection = json.loads(out.getvalue())
        type_names = {t["name"] for t in introspection["__schema"]["types"]}
        assert {"Author", "_BookConnection", "_BookMutation"} <= type_names

    def test_output_file(self, metadata_file, tmp_path):
        target = tmp_path / "schema.graphql"
        out = StringIO()
        call_command(
            "eject_schema",
            metadata_source=str(metadata_file),
            output_file=str(target),
            stdout=out,
        )

        assert "Schema written" in out.getvalue()
        assert "type Book" in target.read_text(encoding="utf-8")

    def test_invalid_source(self, tmp_path):
        with pytest.raises(CommandError):
            call_command(
                "eject_schema",
                metadata_source=str(tmp_path / "missing.json"),
                stdout=StringIO(),
            )
