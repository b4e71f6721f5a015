"""Summarization worker: the pipeline and its Celery binding."""

from .pipeline import SummarizationJob, SummarizationPipeline

__all__ = ["SummarizationJob", "SummarizationPipeline"]
