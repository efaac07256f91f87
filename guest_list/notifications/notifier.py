import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import typer

logger = logging.getLogger(__name__)


class ToastVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Toast:
    title: str
    description: str
    variant: ToastVariant = ToastVariant.DEFAULT


class Notifier(Protocol):
    """Protocol for transient user feedback."""

    def notify(
        self, title: str, description: str, variant: ToastVariant = ToastVariant.DEFAULT
    ) -> None: ...


class LoggingNotifier:
    """Notifier that writes toasts to the application log."""

    def notify(
        self, title: str, description: str, variant: ToastVariant = ToastVariant.DEFAULT
    ) -> None:
        if variant == ToastVariant.DESTRUCTIVE:
            logger.warning(f"{title}: {description}")
        else:
            logger.info(f"{title}: {description}")


class RecordingNotifier:
    """Keeps every toast in memory. Used by tests and previews."""

    def __init__(self) -> None:
        self.toasts: list[Toast] = []

    def notify(
        self, title: str, description: str, variant: ToastVariant = ToastVariant.DEFAULT
    ) -> None:
        self.toasts.append(Toast(title=title, description=description, variant=variant))


class EchoNotifier:
    """Prints toasts to the terminal."""

    def notify(
        self, title: str, description: str, variant: ToastVariant = ToastVariant.DEFAULT
    ) -> None:
        color = typer.colors.RED if variant == ToastVariant.DESTRUCTIVE else typer.colors.GREEN
        typer.secho(title, fg=color, bold=True)
        typer.secho(f"  {description}", fg=color)
