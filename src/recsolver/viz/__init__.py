from .plot import plot_terms, recurrence_label

__all__ = [
    "plot_terms",
    "recurrence_label",
]
