"""
Table row classification.

``RowClassifier`` splits a table's ``<tr>`` elements into header, data and
footer zones using ``<th>`` / ``<tfoot>`` markup.
"""

from detection.rows import RowClassification, RowClassifier

__all__ = [
    "RowClassification",
    "RowClassifier",
]
