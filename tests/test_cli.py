from gdregress.cli import ITERATIONS, LEARNING_RATE, main
from gdregress.csv_reader import read_csv
from gdregress.gradient_descent import gradient_descent
from gdregress.linear_regression import LinearRegression
from gdregress.utils import format_vector, mse


def _write_sample(tmp_path):
    lines = ["x,y"] + [f"{x},{2 + 3 * x}" for x in range(10)]
    path = tmp_path / "sample.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_trains_and_reports(tmp_path, capsys):
    path = _write_sample(tmp_path)
    assert main([str(path)]) == 0
    out_lines = capsys.readouterr().out.splitlines()

    data = read_csv(path)
    model = LinearRegression(data.cols)
    gradient_descent(model, data, LEARNING_RATE, ITERATIONS)
    expected_mse = mse([model.predict(r) for r in data], [r[-1] for r in data])

    assert out_lines[0] == format_vector(model.theta, "Final parameters: ")
    assert out_lines[1] == f"Training MSE: {expected_mse:.6f}"


def test_training_beats_zero_model(tmp_path, capsys):
    path = _write_sample(tmp_path)
    main([str(path)])
    reported = float(capsys.readouterr().out.splitlines()[1].split(":")[1])
    data = read_csv(path)
    untrained = LinearRegression(data.cols)
    baseline = mse([untrained.predict(r) for r in data], [r[-1] for r in data])
    assert reported < baseline


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.csv"
    assert main([str(missing)]) == 1
    assert f"Failed to read CSV file '{missing}'" in capsys.readouterr().err


def test_single_column_rejected(tmp_path, capsys):
    path = tmp_path / "one.csv"
    path.write_text("1\n2\n3\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "at least one feature" in capsys.readouterr().err


def test_malformed_data_rejected(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("1,2\n3,oops\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "non-numeric" in capsys.readouterr().err