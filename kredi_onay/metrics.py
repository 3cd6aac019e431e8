"""Confusion-matrix based metrics for binary classifiers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Metrics:
    """Counts of true/false positives and negatives with derived scores."""

    tp: int = 0
    tn: int = 0
    fp: int = 0
    fn: int = 0

    def update(self, pred: int, actual: int) -> None:
        """Record one prediction against the true label."""
        if pred == 1 and actual == 1:
            self.tp += 1
        elif pred == 0 and actual == 0:
            self.tn += 1
        elif pred == 1 and actual == 0:
            self.fp += 1
        elif pred == 0 and actual == 1:
            self.fn += 1

    def accuracy(self) -> float:
        total = self.tp + self.tn + self.fp + self.fn
        return (self.tp + self.tn) / total if total else 0.0

    def precision(self) -> float:
        predicted = self.tp + self.fp
        return self.tp / predicted if predicted else 0.0

    def recall(self) -> float:
        relevant = self.tp + self.fn
        return self.tp / relevant if relevant else 0.0

    def f1_score(self) -> float:
        p = self.precision()
        r = self.recall()
        return 2 * (p * r) / (p + r) if p + r else 0.0

    def report(self, model_name: str) -> str:
        """One-line summary of all scores as percentages."""
        return (
            f"{model_name} - Doğruluk (Accuracy): {self.accuracy() * 100:.4f}"
            f"%, Kesinlik (Precision): {self.precision() * 100:.4f}"
            f"%, Hatırlama (Recall): {self.recall() * 100:.4f}"
            f"%, F1-Skoru: {self.f1_score() * 100:.4f}%"
        )