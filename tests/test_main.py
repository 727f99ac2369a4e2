import pytest

import main

EXPECTED = [
    "Version 1 (flag + for loop): true",
    "Version 2 (early exit + for loop): true",
    "Version 3 (while loop): true",
    "Version 4 (for-each loop): true",
    "Now testing with target = 99 (not in array):",
    "Version 1 (flag + for loop): false",
    "Version 2 (early exit + for loop): false",
    "Version 3 (while loop): false",
    "Version 4 (for-each loop): false",
]


def test_driver_output(capsys):
    assert main.main([]) == 0
    assert capsys.readouterr().out.splitlines() == EXPECTED


def test_driver_output_is_repeatable(capsys):
    main.main([])
    first = capsys.readouterr().out
    main.main([])
    assert capsys.readouterr().out == first


def test_counts(capsys):
    assert main.main(["--counts"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Version 1 (flag + for loop): true (comparisons=5)"
    assert lines[1] == "Version 2 (early exit + for loop): true (comparisons=4)"
    assert lines[8] == "Version 4 (for-each loop): false (comparisons=5)"


def test_verify(capsys):
    assert main.main(["--verify", "--max-length", "2"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[:9] == EXPECTED
    assert "BOUNDED VERIFICATION SUMMARY" in out
    assert "Variants verified: 4/4" in out


def test_demo(capsys):
    assert main.main(["--demo"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Example 1 → The number is positive."
    assert out[-1] == "Example 14 → p = 5"


def test_show_settings(capsys):
    assert main.main(["--show-settings"]) == 0
    assert "CURRENT SETTINGS" in capsys.readouterr().out


def test_invalid_settings_exit_code(monkeypatch, capsys):
    monkeypatch.setenv("CONTAINS_PRESENT_TARGET", "five")
    assert main.main([]) == 1
    assert "Invalid settings" in capsys.readouterr().err


def test_max_length_is_bounded():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--max-length", "20"])
    assert excinfo.value.code == 2


def test_version():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["--version"])
    assert excinfo.value.code == 0
