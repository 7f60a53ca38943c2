from gridcollage.cli.main import main


def test_too_many_arguments(cfg, capsys, out_dir):
    assert main(["a.png", "b.png"]) == 1
    err = capsys.readouterr().err
    assert "Error: Too many arguments" in err
    assert not (out_dir / "result.png").exists()


def test_default_output(cfg, capsys, out_dir):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.strip() == f"File generated: {out_dir / 'result.png'}"
    assert (out_dir / "result.png").is_file()


def test_explicit_path_creates_directory(cfg, capsys, tmp_path):
    target = tmp_path / "folder" / "image.jpg"
    assert main([str(target)]) == 0
    assert target.is_file()
    assert str(target) in capsys.readouterr().out


def test_bad_extension_reports_error(cfg, capsys):
    assert main(["out.tiff"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Invalid file extension")
    assert "png" in err


def test_wrong_asset_count_reports_error(cfg, capsys, asset_dir, out_dir):
    for p in list(asset_dir.iterdir())[:3]:
        p.unlink()
    assert main([]) == 1
    assert 'Invalid asset count "7"' in capsys.readouterr().err
    assert not (out_dir / "result.png").exists()


def test_write_failure_reports_error(cfg, capsys, out_dir):
    (out_dir / "result.png").mkdir(parents=True)
    assert main([]) == 1
    err = capsys.readouterr().err
    assert err.startswith(f"Error: Cannot write {out_dir / 'result.png'}")
    assert "Traceback" not in err


def test_dash_prefixed_name_after_separator(cfg, capsys, out_dir):
    assert main(["--", "-draft.png"]) == 0
    assert (out_dir / "-draft.png").is_file()
    assert "File generated:" in capsys.readouterr().out
