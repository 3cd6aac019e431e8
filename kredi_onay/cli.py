"""Command line entry point: train and compare the loan approval models."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Sequence, TypeVar

from kredi_onay.data import (
    apply_normalization,
    class_distribution_summary,
    normalize_features,
    read_applications,
)
from kredi_onay.metrics import Metrics
from kredi_onay.models import (
    LinearSVM,
    LogisticRegression,
    Perceptron,
    SimpleDecisionTree,
    SimpleRuleModel,
)

DEFAULT_DATA_FILE = "kredi_basvurusu_veri_seti.csv"
SEED = 42
TRAIN_RATIO = 0.8

BEST_LR = 0.01
BEST_EPOCHS = 500
BEST_LAMBDA = 0.01

T = TypeVar("T")


def split_train_test(
    rows: Sequence[T],
    labels: Sequence[int],
    train_ratio: float,
    rng: random.Random,
) -> tuple[list[T], list[int], list[T], list[int]]:
    """Shuffle and split into (train_rows, train_labels, test_rows, test_labels)."""
    indices = list(range(len(rows)))
    rng.shuffle(indices)
    train_size = int(len(rows) * train_ratio)
    train_idx, test_idx = indices[:train_size], indices[train_size:]
    return (
        [rows[i] for i in train_idx],
        [labels[i] for i in train_idx],
        [rows[i] for i in test_idx],
        [labels[i] for i in test_idx],
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Load the data set, train every model and print test-set scores."""
    parser = argparse.ArgumentParser(description="Compare loan approval classifiers.")
    parser.add_argument("data_file", nargs="?", default=DEFAULT_DATA_FILE)
    args = parser.parse_args(argv)

    try:
        applications = read_applications(args.data_file)
    except OSError:
        print(
            f"Hata: Dosya acilamadi: {args.data_file}. "
            "Lütfen dosyanın mevcut olduğundan emin olun.",
            file=sys.stderr,
        )
        return 1
    if not applications:
        print(
            f"Hata: Veri okunamadi veya dosya bos. Lütfen '{args.data_file}' "
            "dosyasının mevcut olduğundan emin olun.",
            file=sys.stderr,
        )
        return 1

    rng = random.Random(SEED)
    rows = [app.features() for app in applications]
    labels = [app.approved for app in applications]

    print(class_distribution_summary(labels))

    x_train, y_train, x_test, y_test = split_train_test(rows, labels, TRAIN_RATIO, rng)
    print(f"\nVeri Bölümü Boyutları: Eğitim {len(x_train)} örnek, Test {len(x_test)} örnek.")
    if not x_train:
        print("Hata: Eğitim kümesi boş.", file=sys.stderr)
        return 1

    x_train, mins, maxs = normalize_features(x_train)
    x_test = apply_normalization(x_test, mins, maxs)
    n_features = len(x_train[0])

    logreg = LogisticRegression(n_features, BEST_LR, BEST_LAMBDA, rng)
    logreg.train(x_train, y_train, BEST_EPOCHS)

    perceptron = Perceptron(n_features, 0.1, rng)
    perceptron.train(x_train, y_train, 1000)

    rule = SimpleRuleModel()

    tree = SimpleDecisionTree()
    tree.train(x_train, y_train)

    svm = LinearSVM(n_features, 0.01, 0.001, rng)
    svm.train(x_train, y_train, 1000)

    models = {
        "Perceptron": perceptron,
        "Basit Kural Modeli": rule,
        "Lojistik Regresyon": logreg,
        "Basit Karar Ağacı": tree,
        "Doğrusal SVM": svm,
    }
    scores = {name: Metrics() for name in models}
    for x, actual in zip(x_test, y_test):
        for name, model in models.items():
            scores[name].update(model.predict(x), actual)

    print("\n--- Model Performans Sonuçları (Test Kümesi Üzerinden) ---")
    for name, metrics in scores.items():
        print(metrics.report(name))
    return 0


if __name__ == "__main__":
    sys.exit(main())