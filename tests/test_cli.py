from unittest.mock import patch

from typer.testing import CliRunner

from sitegen.building import watch as watch_module
from sitegen.cli import app

runner = CliRunner()


def _args(site, *extra):
    return ["--source", str(site.source_dir), "--dest", str(site.dest_dir), *extra]


def test_build_success_summary(site, make_tree):
    make_tree(site.source_dir, {"index.html": "<!-- template: p.html -->\n", "p.html": "P\n"})

    result = runner.invoke(app, _args(site))

    assert result.exit_code == 0
    assert "Processed:" in result.output
    assert "Static site generation complete." in result.output
    assert (site.dest_dir / "index.html").read_text() == "P\n"


def test_build_failure_summary_lists_messages(site, make_tree):
    make_tree(site.source_dir, {"index.html": "<!-- template: missing.html -->\n"})

    result = runner.invoke(app, _args(site))

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "Static site generation completed with errors:" in lines
    warning = [line for line in lines if line.startswith("- ")]
    assert len(warning) == 1
    assert "missing.html" in warning[0]
    assert lines.index("Generation failed due to errors.") > lines.index(warning[0])
    assert lines[-1] == "Fix the errors and run again. :)"


def test_strict_maps_errors_to_exit_code(site, make_tree):
    make_tree(site.source_dir, {"index.html": "<!-- template: missing.html -->\n"})

    result = runner.invoke(app, _args(site, "--strict"))

    assert result.exit_code == 1


def test_strict_succeeds_on_clean_build(site, make_tree):
    make_tree(site.source_dir, {"a.txt": "a"})

    result = runner.invoke(app, _args(site, "--strict"))

    assert result.exit_code == 0


def test_missing_source_still_exits_zero(tmp_path):
    result = runner.invoke(
        app, ["--source", str(tmp_path / "nope"), "--dest", str(tmp_path / "out")]
    )

    assert result.exit_code == 0
    assert f"- Error opening directory: {tmp_path / 'nope'}" in result.output


def test_max_errors_option_caps_summary(site, make_tree):
    make_tree(
        site.source_dir,
        {f"p{i}.html": "<!-- template: gone.html -->\n" for i in range(5)},
    )

    result = runner.invoke(app, _args(site, "--max-errors", "2"))

    assert len([line for line in result.output.splitlines() if line.startswith("- ")]) == 2


def test_extension_option_selects_markup_files(site, make_tree):
    make_tree(site.source_dir, {"page.htm": "<!-- template: p.txt -->\n", "p.txt": "P\n"})

    result = runner.invoke(app, _args(site, "--ext", "htm"))

    assert result.exit_code == 0
    assert (site.dest_dir / "page.htm").read_text() == "P\n"


def test_zero_line_limit_removes_limit(site, make_tree):
    make_tree(
        site.source_dir,
        {"index.html": "x" * 5000 + "<!-- template: p.html -->\n", "p.html": "P\n"},
    )

    runner.invoke(app, _args(site, "--max-line-length", "0"))

    assert (site.dest_dir / "index.html").read_text() == "P\n"


def test_invalid_mode_is_rejected(site):
    result = runner.invoke(app, _args(site, "--mode", "rwx"))

    assert result.exit_code != 0


def test_watch_flag_runs_watch_loop(site):
    with patch.object(watch_module, "watch") as watch:
        result = runner.invoke(app, _args(site, "--watch"))

    assert result.exit_code == 0
    watch.assert_called_once()
    config = watch.call_args.args[0]
    assert config.source_dir == site.source_dir


def test_watch_interrupt_exits_cleanly(site):
    with patch.object(watch_module, "watch", side_effect=KeyboardInterrupt):
        result = runner.invoke(app, _args(site, "--watch"))

    assert result.exit_code == 0
