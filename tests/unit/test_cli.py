"""Unit tests for the retouch CLI."""

import base64

import pytest
from cli.retouch import load_image, main, write_image


@pytest.fixture
def image_file(temp_dir):
    path = temp_dir / "photo.png"
    path.write_bytes(b"PNGDATA")
    return path


@pytest.mark.unit
class TestImageFiles:
    """Tests for load_image() and write_image()."""

    def test_load_image_encodes_file(self, image_file):
        image = load_image(image_file)

        assert image.mime_type == "image/png"
        assert base64.b64decode(image.data) == b"PNGDATA"

    def test_write_image_adds_extension_from_mime(self, temp_dir):
        written = write_image("data:image/jpeg;base64,QUJD", temp_dir / "out")

        assert written.name == "out.jpg"
        assert written.read_bytes() == b"ABC"

    def test_write_image_keeps_explicit_suffix(self, temp_dir):
        written = write_image("data:image/png;base64,QUJD", temp_dir / "nested" / "cut.png")

        assert written == temp_dir / "nested" / "cut.png"
        assert written.read_bytes() == b"ABC"


@pytest.mark.unit
class TestMain:
    """Tests for the CLI entry point."""

    def test_dry_run_prints_instruction(self, image_file, capsys, mock_genai_client):
        exit_code = main([str(image_file), "--action", "edit", "--prompt", "remove cup", "--x", "10", "--y", "20", "--dry-run"])

        assert exit_code == 0
        output = capsys.readouterr().out
        assert "remove cup" in output
        assert "x: 10, y: 20" in output
        mock_genai_client.aio.models.generate_content.assert_not_called()

    def test_missing_prompt_fails(self, image_file, mock_genai_client):
        assert main([str(image_file), "--action", "filter"]) == 1
        mock_genai_client.aio.models.generate_content.assert_not_called()

    def test_missing_file_fails(self, temp_dir):
        assert main([str(temp_dir / "nope.png"), "--action", "remove-bg"]) == 1

    def test_writes_edited_image(self, image_file, temp_dir, monkeypatch, mock_genai_client, make_genai_response):
        monkeypatch.setenv("API_KEY", "test_key")
        mock_genai_client.aio.models.generate_content.return_value = make_genai_response(image=("image/png", b"ABC"))

        exit_code = main([str(image_file), "--action", "remove-bg", "-o", str(temp_dir / "cutout")])

        assert exit_code == 0
        assert (temp_dir / "cutout.png").read_bytes() == b"ABC"

    def test_model_error_exits_nonzero(self, image_file, monkeypatch, mock_genai_client, make_genai_response):
        monkeypatch.setenv("API_KEY", "test_key")
        mock_genai_client.aio.models.generate_content.return_value = make_genai_response(text="no")

        assert main([str(image_file), "--action", "remove-bg"]) == 1
