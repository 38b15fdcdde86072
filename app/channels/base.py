from abc import ABC, abstractmethod


class BaseChannel(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def post(self, text: str, channel_ref: str) -> bool:
        """Deliver `text` to `channel_ref`. Returns False on failure instead of raising."""

    @abstractmethod
    def is_enabled(self) -> bool:
        pass
