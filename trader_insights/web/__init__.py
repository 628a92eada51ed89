"""Web server for on-demand analysis runs."""
from .app import app, create_app
from .manager import AnalysisManager, AnalysisState, get_analysis_manager

__all__ = ['app', 'create_app', 'AnalysisManager', 'AnalysisState', 'get_analysis_manager']
