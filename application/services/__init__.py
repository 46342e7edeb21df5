from .conversion_controller import ConversionController
from .history import ConversionHistory
from .state_store import StateStore

__all__ = ['ConversionController', 'ConversionHistory', 'StateStore']
