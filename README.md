# kredi_onay

Trains five small classifiers on a CSV file of credit applications. It then
reports how well each one predicts loan approval on a held-out test set.

The models live in `kredi_onay.models`:

- `Perceptron`: a single-layer perceptron with a step activation.
- `SimpleRuleModel`: a fixed rule. It approves when the scaled credit score is at least 0.7 and the scaled income is at least 0.6.
- `LogisticRegression`: logistic regression trained by stochastic gradient steps with an L2 penalty.
- `SimpleDecisionTree`: one split on the scaled credit score at 0.5. Each side takes the majority class, and ties go to 1.
- `LinearSVM`: a linear SVM trained with hinge-loss gradient steps.

## Installation

```
pip install .
```

## Input data

The input is a CSV file with a header line. Each row after it has these columns, in this order:

```
id,age,income,credit_score,home_owner,years_employed,approved
```

- `home_owner` is `E` or `e` for an owner. Any other value means not an owner. An empty field counts as `H`.
- `approved` is `1` or `0`.

Rows that cannot be parsed are skipped. Each skipped row is logged as a warning through the `kredi_onay.data` logger.

## Usage

```
kredi-onay [DATA_FILE]
```

`DATA_FILE` defaults to `kredi_basvurusu_veri_seti.csv` in the current directory.

The command does the following:

1. It prints the class distribution.
2. It shuffles the rows with a fixed seed (42) and splits them 80/20 into training and test sets, then prints their sizes.
3. It min-max scales the features using the training set.
4. It trains every model.
5. For each model, it prints accuracy, precision, recall and F1 score on the test set as percentages.

Because the seed is fixed, the same data always gives the same output.

The command exits with status 1 in any of these cases:

- the file cannot be opened,
- the file holds no valid rows,
- the training set would be empty.

## Library use

```python
import random

from kredi_onay.data import read_applications, normalize_features, apply_normalization
from kredi_onay.models import LogisticRegression
from kredi_onay.metrics import Metrics
from kredi_onay.cli import split_train_test

apps = read_applications("kredi_basvurusu_veri_seti.csv")
rows = [app.features() for app in apps]
labels = [app.approved for app in apps]

rng = random.Random(42)
x_train, y_train, x_test, y_test = split_train_test(rows, labels, 0.8, rng)
x_train, mins, maxs = normalize_features(x_train)
x_test = apply_normalization(x_test, mins, maxs)

model = LogisticRegression(len(x_train[0]), 0.01, 0.01, rng)
model.train(x_train, y_train, 500)

metrics = Metrics()
for x, actual in zip(x_test, y_test):
    metrics.update(model.predict(x), actual)
print(metrics.report("Logistic regression"))
```

Other helpers in `kredi_onay.data`:

- `owner_to_int` maps the home-owner flag to 1 or 0.
- `class_distribution_summary` returns the distribution line that the command prints.

## What it does not do

The package does not do the following:

- save or load trained models,
- search for hyperparameters,
- offer a command for scoring new applications.

Every run trains from scratch, and the model settings are fixed in `kredi_onay.cli`.

## Running the tests

```
pip install .[test]
pytest
```