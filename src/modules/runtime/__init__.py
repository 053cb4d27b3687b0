from .errors import PendingStepError
from .hooks import Hook
from .runtime import Runtime

__all__ = ['Hook', 'PendingStepError', 'Runtime']
