from glasscoverage import cli


def test_lookup_prints_coordinates(capsys) -> None:
    cli._lookup("90210")
    assert "lat=34.05 lng=-118.25" in capsys.readouterr().out


def test_lookup_unknown_zip_is_reported_not_raised(capsys) -> None:
    cli._lookup("99999")
    assert "No coordinates" in capsys.readouterr().out


def test_distance_between_zips(capsys) -> None:
    cli._distance("90210", "92101")
    assert "90210 -> 92101: 111." in capsys.readouterr().out


def test_distance_unknown_zip(capsys) -> None:
    cli._distance("90210", "99999")
    assert "No coordinates for ZIP 99999" in capsys.readouterr().out


def test_check_returns_result_for_covered_and_uncovered() -> None:
    assert cli._check("92101", None).covered is True
    assert cli._check("99999", None).covered is False


def test_main_exits_cleanly_for_unknown_zip(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.argv", ["glasscoverage", "check", "99999"])
    cli.main()
    assert "Please call" in capsys.readouterr().out
