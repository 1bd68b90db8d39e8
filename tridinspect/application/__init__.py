"""Application services for tridinspect."""

from .batch_service import BatchItem, scan_files

__all__ = ["BatchItem", "scan_files"]
