from consumers.console import ConsoleRenderer

__all__ = ["ConsoleRenderer"]
