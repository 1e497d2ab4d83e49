import io
import json

from class_stripper.cli import build_config, build_parser, main


def test_build_config_from_flags():
    args = build_parser().parse_args(
        [
            "--strip-all",
            "--preserve-class",
            "keep",
            "--preserve-pattern",
            "^js-",
            "--remove-tag",
            "script",
            "--no-bubble",
            "--indent-size",
            "4",
        ]
    )
    config = build_config(args)
    assert config.strip_classes is True
    assert config.strip_ids is True
    assert config.strip_aria_attributes is True
    assert [str(matcher) for matcher in config.preserve_classes] == ["keep", "/^js-/"]
    assert config.remove_tags == ("script",)
    assert config.bubble_up_wrapper_divs is False
    assert config.remove_empty_divs is True
    assert config.beautify_options.indent_size == 4


def test_cleans_file_to_stdout(tmp_path, capsys):
    source = tmp_path / "input.html"
    source.write_text('<div class="a"><p id="x">Hi</p></div>', encoding="utf-8")

    exit_code = main([str(source), "--strip-ids", "--no-beautify"])

    assert exit_code == 0
    assert capsys.readouterr().out == "<div><p>Hi</p></div>\n"


def test_reads_stdin_and_writes_output_file(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO('<p class="a">x</p>'))
    target = tmp_path / "out.html"

    exit_code = main(["-", "-o", str(target)])

    assert exit_code == 0
    assert target.read_text(encoding="utf-8") == "<p>x</p>"


def test_json_output(tmp_path, capsys):
    source = tmp_path / "input.html"
    source.write_text('<p class="a b">x</p>', encoding="utf-8")

    exit_code = main([str(source), "--json", "--no-beautify"])

    data = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert data["html"] == "<p>x</p>"
    assert data["statistics"]["classes_removed"] == 2
    assert data["error"] is None


def test_check_mode(tmp_path):
    valid = tmp_path / "valid.html"
    valid.write_text("<div><p>x</p></div>", encoding="utf-8")
    broken = tmp_path / "broken.html"
    broken.write_text("<div><p>x</p></div", encoding="utf-8")

    assert main([str(valid), "--check"]) == 0
    assert main([str(broken), "--check"]) == 1


def test_empty_input_fails(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_missing_file_fails(tmp_path):
    assert main([str(tmp_path / "missing.html")]) == 1


def test_invalid_option_value(tmp_path):
    source = tmp_path / "input.html"
    source.write_text("<p>x</p>", encoding="utf-8")
    assert main([str(source), "--indent-size", "-1"]) == 2
