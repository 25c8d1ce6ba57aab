"""Domain data model and reporting-sink interfaces."""

from . import models, tasks
from .models import Dataset, PerformanceMetrics
from .tasks import ProgressReporter, ReportSink

__all__ = [
	"models",
	"tasks",
	"Dataset",
	"PerformanceMetrics",
	"ProgressReporter",
	"ReportSink",
]
