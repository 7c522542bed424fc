"""
Preprocessing transformers.

Public API:
    StandardScaler  - zero-mean, unit-variance feature scaling
    LabelEncoder    - arbitrary labels to int32 class indices and back
"""

from pylearnkit.preprocessing.label_encoder import LabelEncoder
from pylearnkit.preprocessing.standard_scaler import StandardScaler

__all__ = [
    "LabelEncoder",
    "StandardScaler",
]
