"""
Clustering algorithms.

Public API:
    KMeans - Lloyd iterations with random or k-means++ seeding
"""

from pylearnkit.clustering.k_means import KMeans

__all__ = [
    "KMeans",
]
