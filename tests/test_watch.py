from sitegen.building.watch import changed_paths, snapshot, watch


def test_snapshot_lists_files_and_directories(site, make_tree):
    make_tree(site.source_dir, {"a.txt": "a", "sub/b.txt": "bb"})

    state = snapshot(site.source_dir)

    assert set(state) == {
        site.source_dir / "a.txt",
        site.source_dir / "sub",
        site.source_dir / "sub" / "b.txt",
    }
    assert state[site.source_dir / "sub" / "b.txt"][1] == 2


def test_changed_paths_reports_added_removed_and_modified(tmp_path):
    a, b, c = tmp_path / "a", tmp_path / "b", tmp_path / "c"
    before = {a: (1, 1), b: (1, 1)}
    after = {a: (2, 1), c: (1, 1)}

    assert changed_paths(before, after) == [a, b, c]
    assert changed_paths(before, dict(before)) == []


def test_watch_rebuilds_after_change(site, make_tree, capsys):
    make_tree(site.source_dir, {"a.txt": "a"})
    builds = []
    polls = iter(range(3))

    def fake_sleep(_):
        if next(polls) == 0:
            (site.source_dir / "new.txt").write_text("new")

    rebuilds = watch(
        site,
        interval=0,
        debounce=-1,
        rebuild=builds.append,
        sleep=fake_sleep,
        max_polls=3,
    )

    assert rebuilds == 1
    assert len(builds) == 2
    out = capsys.readouterr().out
    assert "Running in watch mode. Press Ctrl+C to stop." in out
    assert f"Change detected: {site.source_dir / 'new.txt'}" in out


def test_watch_defers_changes_inside_debounce_window(site, make_tree):
    make_tree(site.source_dir, {"a.txt": "a"})
    builds = []

    def fake_sleep(_):
        (site.source_dir / "a.txt").write_text("a" * (len(builds) + 5))

    rebuilds = watch(
        site,
        interval=0,
        debounce=3600,
        rebuild=builds.append,
        sleep=fake_sleep,
        max_polls=2,
    )

    assert rebuilds == 0
    assert len(builds) == 1


def test_watch_initial_build_uses_real_pipeline(site, make_tree, capsys):
    make_tree(site.source_dir, {"index.html": "hello\n"})

    watch(site, interval=0, sleep=lambda _: None, max_polls=1)

    assert (site.dest_dir / "index.html").read_text() == "hello\n"
    assert "Static site generation complete." in capsys.readouterr().out
