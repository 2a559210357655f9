from .win_detector import WinEvaluator

__all__ = ['WinEvaluator']
