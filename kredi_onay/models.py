"""Binary classifiers used to decide on loan applications."""

from __future__ import annotations

import math
import random
from typing import Sequence


def sigmoid(z: float) -> float:
    """Logistic function, clamped to exactly 0 or 1 outside [-30, 30]."""
    if z > 30.0:
        return 1.0
    if z < -30.0:
        return 0.0
    return 1.0 / (1.0 + math.exp(-z))


def _dot(weights: Sequence[float], x: Sequence[float]) -> float:
    return sum(w * v for w, v in zip(weights, x))


def _shuffled_indices(count: int, rng: random.Random) -> list[int]:
    indices = list(range(count))
    rng.shuffle(indices)
    return indices


class Perceptron:
    """Single-layer perceptron with a step activation."""

    def __init__(
        self,
        n_features: int,
        learning_rate: float = 0.01,
        rng: random.Random | None = None,
    ) -> None:
        self.weights = [0.0] * n_features
        self.bias = 0.0
        self.learning_rate = learning_rate
        self._rng = rng if rng is not None else random.Random()

    def predict(self, x: Sequence[float]) -> int:
        """Return 1 when the weighted sum is non-negative, else 0."""
        activation = self.bias + _dot(self.weights, x)
        return int(activation >= 0)

    def train(self, rows: Sequence[Sequence[float]], labels: Sequence[int], epochs: int) -> None:
        """Run ``epochs`` passes of the perceptron rule over shuffled samples."""
        for _ in range(epochs):
            for idx in _shuffled_indices(len(rows), self._rng):
                x = rows[idx]
                error = labels[idx] - self.predict(x)
                if error:
                    step = self.learning_rate * error
                    self.weights = [w + step * v for w, v in zip(self.weights, x)]
                    self.bias += step


class LogisticRegression:
    """Logistic regression trained by stochastic gradient steps with L2 penalty."""

    def __init__(
        self,
        n_features: int,
        learning_rate: float = 0.01,
        reg_param: float = 0.001,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.weights = [self._rng.gauss(0.0, 0.01) for _ in range(n_features)]
        self.bias = 0.0
        self.learning_rate = learning_rate
        self.reg_param = reg_param

    def _probability(self, x: Sequence[float]) -> float:
        return sigmoid(self.bias + _dot(self.weights, x))

    def predict(self, x: Sequence[float]) -> int:
        """Return 1 when the predicted probability is at least 0.5."""
        probability = self._probability(x)
        return int(probability >= 0.5)

    def train(self, rows: Sequence[Sequence[float]], labels: Sequence[int], epochs: int) -> None:
        """Fit the weights over ``epochs`` shuffled passes."""
        lr, lam = self.learning_rate, self.reg_param
        for _ in range(epochs):
            for idx in _shuffled_indices(len(rows), self._rng):
                x = rows[idx]
                error = labels[idx] - self._probability(x)
                self.weights = [
                    w + lr * (error * v - lam * w) for w, v in zip(self.weights, x)
                ]
                self.bias += lr * error


class LinearSVM:
    """Linear support vector machine trained on the hinge loss."""

    def __init__(
        self,
        n_features: int,
        learning_rate: float = 0.01,
        reg_param: float = 0.01,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.weights = [self._rng.gauss(0.0, 0.01) for _ in range(n_features)]
        self.bias = 0.0
        self.learning_rate = learning_rate
        self.reg_param = reg_param

    def decision_function(self, x: Sequence[float]) -> float:
        """Signed distance-like score of ``x`` from the separating plane."""
        return self.bias + _dot(self.weights, x)

    def predict(self, x: Sequence[float]) -> int:
        """Return 1 when the decision value is non-negative, else 0."""
        score = self.decision_function(x)
        return int(score >= 0)

    def train(self, rows: Sequence[Sequence[float]], labels: Sequence[int], epochs: int) -> None:
        """Fit the plane over ``epochs`` shuffled passes; labels are 0/1."""
        lr, lam = self.learning_rate, self.reg_param
        for _ in range(epochs):
            for idx in _shuffled_indices(len(rows), self._rng):
                x = rows[idx]
                target = 1 if labels[idx] == 1 else -1
                if target * self.decision_function(x) < 1:
                    self.weights = [
                        w + lr * (target * v - lam * w) for w, v in zip(self.weights, x)
                    ]
                    self.bias += lr * target
                else:
                    self.weights = [w - lr * lam * w for w in self.weights]


class SimpleDecisionTree:
    """One-split tree on the credit-score column with a fixed threshold of 0.5."""

    feature_index = 2
    threshold = 0.5

    def __init__(self) -> None:
        self.left_class: int | None = None
        self.right_class: int | None = None

    def train(self, rows: Sequence[Sequence[float]], labels: Sequence[int]) -> None:
        """Pick the majority class on each side of the threshold (ties go to 1)."""
        left_pos = left_neg = right_pos = right_neg = 0
        for x, label in zip(rows, labels):
            if x[self.feature_index] < self.threshold:
                if label == 1:
                    left_pos += 1
                else:
                    left_neg += 1
            elif label == 1:
                right_pos += 1
            else:
                right_neg += 1
        self.left_class = 1 if left_pos >= left_neg else 0
        self.right_class = 1 if right_pos >= right_neg else 0

    def predict(self, x: Sequence[float]) -> int:
        """Return the class learned for the side of the threshold ``x`` falls on."""
        if self.left_class is None or self.right_class is None:
            raise RuntimeError("decision tree has not been trained")
        if x[self.feature_index] < self.threshold:
            return self.left_class
        return self.right_class


class SimpleRuleModel:
    """Fixed rule: approve when scaled credit score >= 0.7 and income >= 0.6."""

    credit_score_index = 2
    income_index = 1
    credit_score_cutoff = 0.7
    income_cutoff = 0.6

    def predict(self, x: Sequence[float]) -> int:
        """Return 1 when both scaled credit score and income clear their cutoffs."""
        score = x[self.credit_score_index]
        income = x[self.income_index]
        approved = score >= self.credit_score_cutoff and income >= self.income_cutoff
        return int(approved)