from .signal_cache import SignalCache

__all__ = ["SignalCache"]
