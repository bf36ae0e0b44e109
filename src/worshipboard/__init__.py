"""WorshipBoard - live worship-service display backed by Planning Center."""

__version__ = "0.1.0"
