"""
Data adapters feeding the classifier.
"""

from .csv_loader import Record, load_records, group_by_class, split_records

__all__ = [
    'Record',
    'load_records',
    'group_by_class',
    'split_records'
]
