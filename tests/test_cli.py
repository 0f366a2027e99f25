from PIL import Image

from cli import main


def test_cli_writes_band_image(striped_image_path, tmp_path, capsys):
    output = tmp_path / "bands.png"

    code = main([str(striped_image_path), "-o", str(output), "--width", "40", "--list"])

    assert code == 0
    with Image.open(output) as image:
        assert image.size == (40, 240)
    out = capsys.readouterr().out
    assert "Color Bands (4 bands)" in out
    assert "#ff0000" in out
    assert "#0000ff" in out


def test_cli_default_output_name(striped_image_path):
    code = main([str(striped_image_path), "--threshold", "50", "--min-band-height", "40"])

    assert code == 0
    assert striped_image_path.with_name("stripes-bands.png").exists()


def test_cli_reports_missing_input(tmp_path, capsys):
    code = main([str(tmp_path / "nope.png")])

    assert code == 1
    assert "Error" in capsys.readouterr().err


def test_cli_rejects_negative_threshold(striped_image_path, capsys):
    code = main([str(striped_image_path), "--threshold", "-3"])

    assert code == 1
    assert "color_threshold" in capsys.readouterr().err
