"""Unit tests for the linemark command-line entry point."""

import io
import json
import sys

import pytest

from linemark.cli import main
from linemark.cli.builder import EXIT_FILE_ERROR, EXIT_RENDERING_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestMainConversion:
    """Test converting files through main()."""

    def test_file_to_stdout(self, tmp_path, capsys):
        source = tmp_path / "doc.txt"
        source.write_text("# A\nPlain\n## B", encoding="utf-8")

        assert main([str(source)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<h1>A</h1><p>Plain</p><h2>B</h2>\n"

    def test_file_to_output_file(self, tmp_path, capsys):
        source = tmp_path / "doc.txt"
        source.write_text("### Deep\n---", encoding="utf-8")
        target = tmp_path / "out" / "doc.html"

        assert main([str(source), "--out", str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "<h3>Deep</h3><hr></hr>"
        assert capsys.readouterr().out == ""

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("Just text"))
        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<p>Just text</p>\n"

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == EXIT_FILE_ERROR
        assert "File not found" in capsys.readouterr().err

    def test_unknown_encoding(self, tmp_path, capsys):
        source = tmp_path / "doc.txt"
        source.write_text("# Title", encoding="utf-8")
        assert main([str(source), "--encoding", "no-such-codec"]) == EXIT_FILE_ERROR
        assert "Unknown encoding: no-such-codec" in capsys.readouterr().err

    def test_output_encoding_cannot_hold_text(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("# caf\xe9"))
        target = tmp_path / "o.html"
        assert main(["--out", str(target), "--encoding", "ascii"]) == EXIT_RENDERING_ERROR
        assert "Cannot encode output" in capsys.readouterr().err

    def test_undecodable_input(self, tmp_path, capsys):
        source = tmp_path / "latin.txt"
        source.write_bytes("# caf\xe9".encode("latin-1"))
        assert main([str(source)]) == EXIT_FILE_ERROR

        assert main([str(source), "--encoding", "latin-1"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.endswith("<h1>caf\xe9</h1>\n")

    def test_negative_debounce_rejected(self, tmp_path):
        source = tmp_path / "doc.txt"
        source.write_text("x")
        assert main([str(source), "--watch-debounce", "-1"]) == EXIT_VALIDATION_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestMainConfiguration:
    """Test config file and environment handling in main()."""

    def test_discovered_config_sets_output(self, tmp_path, isolated_environment, capsys):
        source = tmp_path / "doc.txt"
        source.write_text("# From config")
        target = tmp_path / "configured.html"
        (isolated_environment / ".linemark.json").write_text(json.dumps({"out": str(target)}))

        assert main([str(source)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "<h1>From config</h1>"

    def test_no_config_skips_discovery(self, tmp_path, isolated_environment, capsys):
        source = tmp_path / "doc.txt"
        source.write_text("# Plain")
        (isolated_environment / ".linemark.json").write_text(json.dumps({"out": str(tmp_path / "x.html")}))

        assert main([str(source), "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<h1>Plain</h1>\n"
        assert not (tmp_path / "x.html").exists()

    def test_explicit_config(self, tmp_path, capsys):
        source = tmp_path / "doc.txt"
        source.write_text("x")
        config = tmp_path / "custom.yaml"
        target = tmp_path / "from_yaml.html"
        config.write_text(f"out: '{target}'\n")

        assert main([str(source), "--config", str(config)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "<p>x</p>"

    def test_config_from_environment_variable(self, tmp_path, monkeypatch):
        source = tmp_path / "doc.txt"
        source.write_text("x")
        config = tmp_path / "env.json"
        target = tmp_path / "env.html"
        config.write_text(json.dumps({"out": str(target)}))
        monkeypatch.setenv("LINEMARK_CONFIG", str(config))

        assert main([str(source)]) == EXIT_SUCCESS
        assert target.exists()

    def test_invalid_config_value(self, isolated_environment, capsys):
        (isolated_environment / ".linemark.toml").write_text('log_level = "LOUD"')
        assert main(["-"]) == EXIT_VALIDATION_ERROR
        assert "log_level" in capsys.readouterr().err

    def test_unreadable_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.toml")]) == EXIT_VALIDATION_ERROR

    def test_env_var_overrides_config(self, tmp_path, isolated_environment, monkeypatch):
        source = tmp_path / "doc.txt"
        source.write_text("x")
        from_config = tmp_path / "config.html"
        from_env = tmp_path / "env.html"
        (isolated_environment / ".linemark.json").write_text(json.dumps({"out": str(from_config)}))
        monkeypatch.setenv("LINEMARK_OUT", str(from_env))

        assert main([str(source)]) == EXIT_SUCCESS
        assert from_env.exists()
        assert not from_config.exists()


@pytest.mark.unit
@pytest.mark.cli
class TestMainWatchValidation:
    """Test argument checks performed before entering watch mode."""

    def test_watch_requires_out(self, tmp_path, capsys):
        source = tmp_path / "doc.txt"
        source.write_text("x")
        assert main([str(source), "--watch"]) == EXIT_VALIDATION_ERROR
        assert "--out" in capsys.readouterr().err

    def test_watch_rejects_stdin(self, tmp_path, capsys):
        assert main(["--watch", "--out", str(tmp_path / "o.html")]) == EXIT_VALIDATION_ERROR

    def test_watch_requires_existing_file(self, tmp_path):
        args = [str(tmp_path / "missing.txt"), "--watch", "--out", str(tmp_path / "o.html")]
        assert main(args) == EXIT_FILE_ERROR

    def test_watch_dispatches_to_runner(self, tmp_path, monkeypatch):
        source = tmp_path / "doc.txt"
        source.write_text("x")
        calls = []

        def fake_run_watch_mode(src, out, encoding, debounce):
            calls.append((src, out, encoding, debounce))
            return 0

        monkeypatch.setattr("linemark.cli.watch.run_watch_mode", fake_run_watch_mode)
        args = [str(source), "--watch", "--out", str(tmp_path / "o.html"), "--watch-debounce", "2"]
        assert main(args) == EXIT_SUCCESS
        assert calls == [(source, tmp_path / "o.html", "utf-8", 2.0)]
