"""
Technical analysis module for the dashboard's Fibonacci/Gann overlay.
Provides modular components for swing location, trend classification, level calculation and PRZ detection.
"""

from .analyzer import TechnicalAnalyzer, perform_technical_analysis
from .config import FibonacciConstants, GannAngle, GannConstants, PRZConstants
from .gann_projector import GannProjector
from .level_calculator import LevelCalculator
from .prz_detector import PRZDetector
from .support_resistance import calculate_support_resistance
from .swing_locator import find_swing_points
from .trend_detector import TrendDetector

__all__ = [
    "TechnicalAnalyzer",
    "perform_technical_analysis",
    "FibonacciConstants",
    "GannAngle",
    "GannConstants",
    "PRZConstants",
    "GannProjector",
    "LevelCalculator",
    "PRZDetector",
    "calculate_support_resistance",
    "find_swing_points",
    "TrendDetector",
]
