from linkshortener.lifecycle.coordinator import LifecycleCoordinator
from linkshortener.lifecycle.sweeper import ExpirySweeper


__all__ = [
    'LifecycleCoordinator',
    'ExpirySweeper',
]
