"""Statement builders."""

from .constraints import ConstraintWriter, ConstraintWriterError

__all__ = ["ConstraintWriter", "ConstraintWriterError"]
