"""
Integration tests: exporting CSV files through the filesystem artifact host.
"""

import pytest

from src.export import (
    BOM,
    PROFITABILITY_COLUMNS,
    DirectoryArtifactHost,
    column,
    export_to_csv,
)
from src.utils.validation import ArtifactNameError


def leftover_temp_files(directory):
    return [p for p in directory.iterdir() if p.name.endswith(".part")]


@pytest.mark.integration
class TestDirectoryArtifactHost:
    """Tests for DirectoryArtifactHost"""

    def test_export_writes_file(self, tmp_path, simple_columns):
        host = DirectoryArtifactHost(tmp_path / "out")

        export_to_csv([{"code": "F-1", "name": "山田邸", "active": True}], simple_columns, "fields.csv", host)

        target = tmp_path / "out" / "fields.csv"
        assert target.read_bytes().startswith(b"\xef\xbb\xbf")
        assert target.read_text(encoding="utf-8") == BOM + "Code,Name,Active\nF-1,山田邸,はい"
        assert leftover_temp_files(tmp_path / "out") == []

    def test_utf8_sig_readers_see_clean_header(self, tmp_path):
        host = DirectoryArtifactHost(tmp_path)
        export_to_csv([], PROFITABILITY_COLUMNS, "収益性レポート_2026-01-10.csv", host)

        text = (tmp_path / "収益性レポート_2026-01-10.csv").read_text(encoding="utf-8-sig")
        assert text == "現場コード,現場名,顧客名,売上,人件費,経費,粗利益,粗利益率(%),案件数"

    def test_bad_filename_leaves_nothing_behind(self, tmp_path, simple_columns):
        host = DirectoryArtifactHost(tmp_path)

        with pytest.raises(ArtifactNameError):
            export_to_csv([], simple_columns, "../escape.csv", host)

        assert list(tmp_path.iterdir()) == []
        assert not (tmp_path.parent / "escape.csv").exists()

    def test_no_overwrite(self, tmp_path, simple_columns):
        (tmp_path / "fields.csv").write_text("original", encoding="utf-8")
        host = DirectoryArtifactHost(tmp_path, overwrite=False)

        with pytest.raises(FileExistsError):
            export_to_csv([], simple_columns, "fields.csv", host)

        assert (tmp_path / "fields.csv").read_text(encoding="utf-8") == "original"
        assert leftover_temp_files(tmp_path) == []

    def test_overwrite_replaces_file(self, tmp_path, simple_columns):
        (tmp_path / "fields.csv").write_text("original", encoding="utf-8")

        export_to_csv([], simple_columns, "fields.csv", DirectoryArtifactHost(tmp_path))

        assert (tmp_path / "fields.csv").read_text(encoding="utf-8") == BOM + "Code,Name,Active"

    def test_failed_generation_writes_nothing(self, tmp_path):
        def explode(value):
            raise ValueError("cannot format")

        with pytest.raises(ValueError):
            export_to_csv([{"a": 1}], [column("a", "A", explode)], "a.csv", DirectoryArtifactHost(tmp_path))

        assert list(tmp_path.iterdir()) == []

    def test_release_removes_untriggered_artifact(self, tmp_path):
        host = DirectoryArtifactHost(tmp_path)

        handle = host.create_artifact(b"data", "text/csv")
        assert handle.exists()

        host.release_artifact(handle)
        assert list(tmp_path.iterdir()) == []


@pytest.mark.integration
class TestArtifactNames:
    """Tests for export file name validation"""

    @pytest.mark.parametrize("name", ["report.csv", "案件レビュー_2026-01-10.csv", " padded.csv "])
    def test_valid_names(self, name):
        from src.utils.validation import validate_artifact_name

        assert validate_artifact_name(name) == name.strip()

    @pytest.mark.parametrize(
        "name", ["", "   ", "../x.csv", "dir/x.csv", "dir\\x.csv", "x\x00.csv", "a*.csv", "あ" * 100]
    )
    def test_invalid_names(self, name):
        from src.utils.validation import validate_artifact_name

        with pytest.raises(ArtifactNameError):
            validate_artifact_name(name)

    def test_input_path_must_exist(self, tmp_path):
        from src.utils.validation import validate_file_path

        with pytest.raises(ArtifactNameError):
            validate_file_path(tmp_path / "missing.json")
        with pytest.raises(ArtifactNameError):
            validate_file_path(tmp_path)

        existing = tmp_path / "in.json"
        existing.write_text("[]", encoding="utf-8")
        assert validate_file_path(str(existing)) == existing
