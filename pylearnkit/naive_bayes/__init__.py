"""
Naive Bayes classifiers.

Public API:
    GaussianNB - normal class-conditional likelihoods
"""

from pylearnkit.naive_bayes.gaussian_nb import GaussianNB

__all__ = [
    "GaussianNB",
]
