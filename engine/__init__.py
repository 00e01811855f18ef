"""Engine package exposing core Chartify functionality."""
from .catalog import CHART_CATALOG, ChartTypeInfo, default_axes, recommend_chart_kind
from .coercion import coerce_numeric, is_numeric
from .errors import ChartifyError, IngestionInProgressError
from .figures import build_figure
from .loader import DataLoader, detect_file_kind, ingest
from .models import ChartDataset, ChartKind, ChartRequest, FileKind, IngestResult, Table
from .transformer import EXTENDED_PALETTE, PALETTE, transform

__all__ = [
    "CHART_CATALOG",
    "ChartDataset",
    "ChartKind",
    "ChartRequest",
    "ChartTypeInfo",
    "ChartifyError",
    "DataLoader",
    "EXTENDED_PALETTE",
    "FileKind",
    "IngestResult",
    "IngestionInProgressError",
    "PALETTE",
    "Table",
    "build_figure",
    "coerce_numeric",
    "default_axes",
    "detect_file_kind",
    "ingest",
    "is_numeric",
    "recommend_chart_kind",
    "transform",
]
