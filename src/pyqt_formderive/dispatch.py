"""
Abstract base class for enum-driven dispatch.

Used by services that:
1. Define an enum for strategies
2. Map each enum value to a handler method
3. Determine the strategy from their input
4. Dispatch to that handler

Example:
    class MyService(StrategyDispatcher[MyStrategy]):
        def __init__(self):
            super().__init__()
            self._register_handlers({
                MyStrategy.TYPE_A: self._handle_type_a,
                MyStrategy.TYPE_B: self._handle_type_b,
            })

        def _determine_strategy(self, context, **kwargs) -> MyStrategy:
            return MyStrategy.TYPE_A if some_condition else MyStrategy.TYPE_B
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TypeVar, Generic, Dict, Callable, Any
import logging

logger = logging.getLogger(__name__)

StrategyEnum = TypeVar('StrategyEnum', bound=Enum)


class StrategyDispatcher(ABC, Generic[StrategyEnum]):
    """
    Base class for services using enum-driven dispatch.

    Subclasses register one handler per strategy in __init__() and implement
    _determine_strategy(). Handlers receive the primary context and the
    keyword arguments passed to dispatch().
    """

    def __init__(self):
        self._handlers: Dict[StrategyEnum, Callable] = {}

    def _register_handlers(self, handlers: Dict[StrategyEnum, Callable]) -> None:
        """
        Register strategy handlers.

        Raises:
            ValueError: If handlers dict is empty
        """
        if not handlers:
            raise ValueError(f"{self.__class__.__name__}: Handler registry cannot be empty")

        self._handlers = handlers
        logger.debug(f"{self.__class__.__name__}: Registered {len(handlers)} handlers")

    @abstractmethod
    def _determine_strategy(self, context: Any, **kwargs) -> StrategyEnum:
        """Return the strategy to use for ``context``."""
        pass

    def dispatch(self, context: Any, **kwargs) -> Any:
        """
        Dispatch ``context`` to the handler of its strategy.

        Raises:
            KeyError: If strategy is not registered in handlers
        """
        strategy = self._determine_strategy(context, **kwargs)

        if strategy not in self._handlers:
            raise KeyError(
                f"{self.__class__.__name__}: No handler registered for strategy {strategy}. "
                f"Available strategies: {list(self._handlers.keys())}"
            )
        handler = self._handlers[strategy]
        logger.debug(f"{self.__class__.__name__}: Dispatching to {strategy.value} handler")
        return handler(context, **kwargs)

    def get_registered_strategies(self) -> list[StrategyEnum]:
        """List of strategies that have registered handlers."""
        return list(self._handlers.keys())
