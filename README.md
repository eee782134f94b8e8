# gdregress

Fit a linear regression model to numeric CSV data with batch gradient descent.
The package has no dependencies beyond the Python standard library.

## Input format

- Every field in a data row must be numeric. A field is read by its longest
  numeric prefix. Decimal, exponent, hexadecimal, `inf` and `nan` forms are
  accepted.
- The last column holds the target `y`. The columns before it are the features `x1..xn`.
- If the first non-blank line is not numeric, it is treated as a header and skipped.
- Blank lines are ignored.
- Fields may be quoted. Quotes are removed and backslash escapes are honoured
  inside them. A trailing comma does not add a field.
- Empty or non-numeric fields in data rows raise an error.
- All data rows must have the same number of columns.

## Command line

```
gdregress data.csv
```

The command trains the model with a learning rate of 0.01 for 1000 iterations.
It prints the learned parameters, bias first, and then the mean squared error
on the training data:

```
Final parameters: [0.123456, 2.345678]
Training MSE: 0.012345
```

The command exits with status 1 in these cases:

- It is not given exactly one argument. It then prints a usage line.
- The file cannot be opened or holds malformed data.
- The file has fewer than two columns.
- Training fails.

Error messages go to standard error.

## Library use

```python
from gdregress.csv_reader import read_csv
from gdregress.linear_regression import LinearRegression
from gdregress.gradient_descent import gradient_descent
from gdregress.utils import mse, print_vector

data = read_csv("data.csv")
model = LinearRegression(data.cols)     # features + bias
gradient_descent(model, data, alpha=0.01, iterations=1000)

print_vector(model.theta, "Final parameters: ")
predictions = [model.predict(row) for row in data]
print(mse(predictions, [row[-1] for row in data]))
```

### `gdregress.csv_reader`

- `read_csv(filename)` reads a file and returns a `CSVData`.
- `read_csv_lines(lines)` builds a `CSVData` from any iterable of text lines.
- `tokenize_line(line)` splits one line into trimmed string tokens.
- `parse_line(line)` turns one line into a list of floats.
- `CSVData` is an immutable table of floats:
  - `data` holds the rows as tuples.
  - `rows` and `cols` give its size.
  - It supports `len()`, iteration and indexing by row.

### `gdregress.linear_regression`

- `LinearRegression(n_features)` starts with all parameters in `theta` at 0.0.
  `theta[0]` is the bias.
- `n_features` gives the number of parameters, bias included.
- `predict(features)` uses the first `n_features - 1` values and ignores any
  further ones, such as a trailing target.

### `gdregress.gradient_descent`

- `gradient_descent(model, data, alpha, iterations)` updates `model.theta` in place.

### `gdregress.utils`

- `format_vector(values, label)` renders values as `label[v1, v2, ...]` with
  six decimals each.
- `print_vector(values, label, file)` writes that text to `file`, or to
  standard output by default.
- `mse(predictions, targets)` returns the mean squared error. It returns 0.0
  for empty input.

### Errors

- `read_csv` raises `CSVError`, a subclass of `ValueError`, when the file
  cannot be opened, when a field is empty or non-numeric, when column counts
  differ, or when no numeric data rows are found. `read_csv_lines` and
  `parse_line` raise it for the same kinds of malformed input.
- `gradient_descent` raises `ValueError` in these cases:
  - the data has no rows or fewer than two columns;
  - `alpha` or `iterations` is not positive;
  - `model.n_features` differs from `data.cols`.
- `LinearRegression` raises `ValueError` in these cases:
  - `n_features` is not positive;
  - `predict` is given too few features.
- `mse` raises `ValueError` when its inputs differ in length.

## What it does not do

The command line has no options. The learning rate and iteration count are
fixed, and there is no feature scaling. Trained models are not saved or
loaded. There is no separate prediction on new data, and no train/test split.

## Tests

```
pip install -e ".[test]"
pytest
```