from .merge import BackfillMergeStep

__all__ = ["BackfillMergeStep"]
