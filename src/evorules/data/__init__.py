"""Transaction data sources for rule evaluation."""

from src.evorules.data.transactions import Transaction, TransactionDataset
from src.evorules.data.sample import SAMPLE_TRANSACTIONS, load_sample_dataset

__all__ = [
    "Transaction",
    "TransactionDataset",
    "SAMPLE_TRANSACTIONS",
    "load_sample_dataset",
]
