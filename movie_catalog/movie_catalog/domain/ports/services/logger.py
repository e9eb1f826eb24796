from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging sink used by domain services, kept free of the logging backend."""

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass
