"""
Pipelines - stateless orchestration across services.
"""

from profilesite.pipelines.namecard import import_namecard_pipeline

__all__ = ["import_namecard_pipeline"]
