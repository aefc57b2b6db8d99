from .quote_orchestrator import FetchOrchestrator, Fetcher

__all__ = ["FetchOrchestrator", "Fetcher"]
