"""Document pipeline: selection, connectivity gate, extraction and analysis.

Responsibilities:
    - PDF selection validation
    - Online/offline gating of runs
    - Sequencing extraction before analysis with a minimum text length
    - Discarding results of superseded runs
"""

from guide_analyzer.pipeline.config import PipelineConfig, get_pipeline_config
from guide_analyzer.pipeline.connectivity import ConnectivityMonitor, get_connectivity_monitor
from guide_analyzer.pipeline.session import Analyzer, DocumentPipeline, Extractor

__all__ = [
    "Analyzer",
    "ConnectivityMonitor",
    "DocumentPipeline",
    "Extractor",
    "PipelineConfig",
    "get_connectivity_monitor",
    "get_pipeline_config",
]
