import pytest

from json_schema_to_struct.errors import OutputValidationError
from json_schema_to_struct.writer import AtomicWriter, validate_python

VALID = "from dataclasses import dataclass\n\n\n@dataclass\nclass Model:\n    a: int\n"


class TestAtomicWriter:
    def test_write_creates_parent_directories(self, tmp_path):
        target = tmp_path / "out" / "models" / "model.py"
        AtomicWriter().write(target, VALID)
        assert target.read_text(encoding="utf-8") == VALID

    def test_write_replaces_existing_file(self, tmp_path):
        target = tmp_path / "model.py"
        target.write_text("old = 1\n")
        AtomicWriter().write(target, VALID)
        assert target.read_text(encoding="utf-8") == VALID

    def test_invalid_content_leaves_target_untouched(self, tmp_path):
        target = tmp_path / "model.py"
        target.write_text("old = 1\n")

        with pytest.raises(OutputValidationError):
            AtomicWriter().write(target, "class :\n")

        assert target.read_text() == "old = 1\n"
        assert [p.name for p in tmp_path.iterdir()] == ["model.py"]

    def test_validation_can_be_skipped(self, tmp_path):
        target = tmp_path / "model.py"
        AtomicWriter().write(target, "not python at all", validate=False)
        assert target.read_text() == "not python at all"

    def test_custom_validator(self, tmp_path):
        seen = []
        AtomicWriter(validate=seen.append).write(tmp_path / "model.py", VALID)
        assert seen == [VALID]

    def test_write_if_not_exists(self, tmp_path):
        target = tmp_path / "model.py"
        assert AtomicWriter().write_if_not_exists(target, VALID)
        with pytest.raises(FileExistsError):
            AtomicWriter().write_if_not_exists(target, VALID)


def test_validate_python():
    validate_python(VALID)
    with pytest.raises(OutputValidationError):
        validate_python("def (")
