import pandas as pd

from main import main


def test_ttest_command_prints_result(capsys):
    code = main(["ttest", "4.2, 5.1 6.0\n5.3", "--mu0", "5"])
    out = capsys.readouterr().out
    assert code == 0
    assert "t-stat" in out
    assert "Fail to reject H₀" in out


def test_invalid_input_returns_error_code(capsys):
    code = main(["ttest", "4.2", "--mu0", "5"])
    assert code == 2
    assert "Invalid input" in capsys.readouterr().out


def test_anova_command_from_csv_saves_tables(tmp_path, capsys):
    csv_path = tmp_path / "groups.csv"
    pd.DataFrame(
        {"group": ["a", "a", "a", "b", "b", "b"], "value": [1, 2, 3, 4, 5, 6]}
    ).to_csv(csv_path, index=False)
    out_dir = tmp_path / "out"

    code = main(
        ["anova", "--csv", str(csv_path), "--output-dir", str(out_dir), "--save"]
    )
    assert code == 0
    assert "Groups = 2" in capsys.readouterr().out
    assert (out_dir / "anova_table.csv").exists()
    assert (out_dir / "group_summary.csv").exists()


def test_regression_and_paired_commands(capsys):
    assert main(["regression", "1 2 3 4 5", "2 3 6 8 10"]) == 0
    assert "R²" in capsys.readouterr().out
    assert main(["paired", "1 2 3", "2 4 6"]) == 0
    assert "Correlation (r)" in capsys.readouterr().out
    assert main(["stats", "1, 2, 2, 3"]) == 0
    assert "Median" in capsys.readouterr().out


def test_guides_commands(capsys):
    assert main(["cheatsheet"]) == 0
    assert "Type I error" in capsys.readouterr().out
    assert main(["tutorial"]) == 0
    assert "data.frame" in capsys.readouterr().out


def test_anova_command_with_inline_groups(capsys):
    code = main(["anova", "1 2 3", "4, 5, 6", "7 8 9"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Groups = 3" in out
    assert "Reject H₀" in out
