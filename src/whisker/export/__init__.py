"""Export layer — static output generation.

Pre-renders every content route as a static HTML file.
"""

from whisker.export.static import ExportedFile, ExportResult, StaticExporter

__all__ = ["ExportedFile", "ExportResult", "StaticExporter"]
